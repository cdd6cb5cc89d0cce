"""``ebsl-reputation paths <attestations-file>`` — List trust paths.

Searches the attester graph for every path from the observer to the
target within the depth limit and shows the opinion transmitted along each.

Exit Codes:
    0 — One or more trust paths found.
    1 — No trust path connects the observer to the target.
    2 — Attestation file could not be loaded.
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
from ebsl_reputation.core.reputation import ReputationEngine, ReputationOptions
from ebsl_reputation.exceptions import ReputationError


@click.command("paths")
@click.argument("attestations_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--observer", required=True, help="Address the search starts from.")
@click.option("--target", required=True, help="Address the search looks for.")
@max_depth_option
@min_trust_option
@discount_option
@format_option
@verbose_option
def paths_command(
    attestations_file: str,
    observer: str,
    target: str,
    max_depth: int,
    min_trust: float,
    discount_method: str,
    output_format: str,
    verbose: bool,
) -> None:
    """List the trust paths from an observer to a target.

    Exit code 0 when at least one path exists, 1 when none does, 2 if the
    attestation file cannot be loaded.
    """
    configure_logging(verbose)
    graph = build_attestation_graph(load_or_exit(attestations_file, output_format))

    try:
        engine = ReputationEngine(
            ReputationOptions(
                max_path_depth=max_depth,
                min_trust_level=min_trust,
                discount_method=discount_method,
                max_paths=sys.maxsize,
            )
        )
        paths = engine.transitive_paths(observer, target, graph)
    except ReputationError as exc:
        fail(str(exc), output_format)

    if output_format == "json":
        click.echo(json.dumps({
            "observer": observer,
            "target": target,
            "paths": [p.as_dict() for p in paths],
        }, indent=2))
    else:
        from ebsl_reputation.cli.output import print_paths
        print_paths(paths)

    sys.exit(0 if paths else 1)
