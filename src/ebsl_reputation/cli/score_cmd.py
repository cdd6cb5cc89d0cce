"""``ebsl-reputation score <attestations-file>`` — Compute an address's reputation.

Loads the attestation file, builds the attester graph, fuses the
attestations about the target with the trust that reaches it from the
observer (if given), and displays the score, category, and opinion.

Exit Codes:
    0 — Reputation computed and displayed.
    2 — Attestation file could not be loaded, or options were invalid.
"""

from __future__ import annotations

import json
import sys

import click

from ebsl_reputation.cli.common import (
    configure_logging,
    discount_option,
    fail,
    format_option,
    load_or_exit,
    max_depth_option,
    min_trust_option,
    verbose_option,
)
from ebsl_reputation.core.attestation import build_attestation_graph
from ebsl_reputation.core.reputation import (
    ReputationEngine,
    ReputationOptions,
    summarize,
)
from ebsl_reputation.exceptions import ReputationError


@click.command("score")
@click.argument("attestations_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--target", required=True, help="Address to compute the reputation of.")
@click.option(
    "--observer",
    default=None,
    help="Viewer address for personalised reputation (default: global).",
)
@max_depth_option
@min_trust_option
@click.option(
    "--max-paths",
    type=click.IntRange(min=0),
    default=10,
    show_default=True,
    help="Maximum number of trust paths used.",
)
@click.option(
    "--transitive-weight",
    type=click.FloatRange(0.0, 1.0),
    default=0.5,
    show_default=True,
    help="Weight of transitive trust relative to direct attestations.",
)
@discount_option
@format_option
@verbose_option
def score_command(
    attestations_file: str,
    target: str,
    observer: str | None,
    max_depth: int,
    min_trust: float,
    max_paths: int,
    transitive_weight: float,
    discount_method: str,
    output_format: str,
    verbose: bool,
) -> None:
    """Compute and display the reputation of an address.

    ATTESTATIONS_FILE is a JSON or YAML export of attestations. Without
    --observer only attestations about the target count; with it, trust
    paths from the observer to the target contribute as well.
    """
    configure_logging(verbose)
    attestations = load_or_exit(attestations_file, output_format)
    graph = build_attestation_graph(attestations)

    try:
        engine = ReputationEngine(
            ReputationOptions(
                max_path_depth=max_depth,
                transitive_weight=transitive_weight,
                max_paths=max_paths,
                min_trust_level=min_trust,
                discount_method=discount_method,
            )
        )
        result = engine.calculate(target, attestations, graph, observer)
    except ReputationError as exc:
        fail(str(exc), output_format)

    summary = summarize(result)
    if output_format == "json":
        click.echo(json.dumps({
            "address": target,
            "observer": observer,
            "summary": summary.as_dict(),
            "result": result.as_dict(),
        }, indent=2))
    else:
        from ebsl_reputation.cli.output import print_reputation
        print_reputation(target, result, summary)

    sys.exit(0)
