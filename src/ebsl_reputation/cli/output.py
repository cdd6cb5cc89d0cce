"""Rich output formatting helpers for the ebsl-reputation CLI.

Provides category-colored terminal output for reputation summaries and
trust-path listings.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ebsl_reputation.core.reputation import (
    PathDetail,
    ReputationResult,
    ReputationSummary,
    TrustCategory,
)

_CATEGORY_STYLES: dict[TrustCategory, str] = {
    TrustCategory.UNTRUSTED: "bold red",
    TrustCategory.LOW_TRUST: "yellow",
    TrustCategory.NEUTRAL: "white",
    TrustCategory.TRUSTED: "cyan",
    TrustCategory.HIGHLY_TRUSTED: "bold green",
}

console = Console()


def category_style(category: TrustCategory) -> str:
    """Return the Rich style string for a trust category."""
    return _CATEGORY_STYLES.get(category, "white")


def print_reputation(
    target: str,
    result: ReputationResult,
    summary: ReputationSummary,
) -> None:
    """Print a reputation summary followed by the paths it used.

    Args:
        target: Address the reputation was computed for.
        result: Full result from the aggregator.
        summary: Display summary of ``result``.
    """
    header = Text.assemble(
        ("Address: ", "bold"), (target, ""),
        ("  Category: ", "bold"),
        (summary.category.value, category_style(summary.category)),
    )
    console.print(Panel(header, title="Reputation"))
    console.print(f"  Score:       [bold]{summary.score}[/bold] / 100")
    console.print(f"  Confidence:  {summary.confidence}%")
    console.print(
        f"  Opinion:     belief {summary.belief}%  "
        f"disbelief {summary.disbelief}%  uncertainty {summary.uncertainty}%"
    )
    console.print(
        f"  Evidence:    {summary.direct_count} direct, "
        f"{summary.transitive_count} transitive ({result.method})"
    )
    if result.paths:
        print_paths(result.paths)


def print_paths(paths: list[PathDetail]) -> None:
    """Print a table of trust paths.

    Args:
        paths: Path diagnostics, shortest first.
    """
    if not paths:
        console.print("[dim]No trust paths found.[/dim]")
        return

    table = Table(title="Trust Paths", show_header=True, header_style="bold")
    table.add_column("Hops", justify="right")
    table.add_column("Path")
    table.add_column("Belief", justify="right")
    table.add_column("Uncertainty", justify="right")
    table.add_column("Expectation", justify="right")

    for detail in paths:
        table.add_row(
            str(len(detail.addresses) - 1),
            " -> ".join(detail.addresses),
            f"{detail.opinion.belief:.3f}",
            f"{detail.opinion.uncertainty:.3f}",
            f"{detail.expectation:.3f}",
        )
    console.print(table)
