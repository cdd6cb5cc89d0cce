"""Options and helpers shared by the reputation subcommands."""

from __future__ import annotations

import json
import logging
import sys
from typing import NoReturn

import click

from ebsl_reputation.core.attestation import Attestation, load_attestations
from ebsl_reputation.core.reputation import DiscountMethod
from ebsl_reputation.exceptions import ReputationError


def configure_logging(verbose: bool) -> None:
    """Send the engine's debug records to stderr when ``verbose`` is set."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def load_or_exit(path: str, output_format: str) -> list[Attestation]:
    """Load an attestation file, exiting with code 2 on failure."""
    try:
        return load_attestations(path)
    except ReputationError as exc:
        fail(str(exc), output_format)


def fail(message: str, output_format: str, exit_code: int = 2) -> NoReturn:
    """Report an error in the requested format and exit."""
    if output_format == "json":
        click.echo(json.dumps({"error": message}))
    else:
        click.echo(f"Error: {message}")
    sys.exit(exit_code)


format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)

max_depth_option = click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=3,
    show_default=True,
    help="Maximum hops in a trust path.",
)

min_trust_option = click.option(
    "--min-trust",
    type=click.FloatRange(0.0, 100.0),
    default=50.0,
    show_default=True,
    help="Ignore attestations below this trust level when following paths.",
)

discount_option = click.option(
    "--discount-method",
    type=click.Choice([m.value for m in DiscountMethod]),
    default=DiscountMethod.GENERIC.value,
    show_default=True,
    help="Discount operator applied along trust paths.",
)

verbose_option = click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log engine debug output to stderr.",
)
