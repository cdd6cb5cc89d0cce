"""ebsl-reputation CLI — Evidence-based trust scores for attestation networks.

Entry point for the ``ebsl-reputation`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    score  — Compute and display the reputation of an address.
    paths  — List the trust paths from an observer to a target.

Usage::

    ebsl-reputation score attestations.json --target 0xDDD
    ebsl-reputation score attestations.yaml --target 0xDDD --observer 0xAAA
    ebsl-reputation paths attestations.json --observer 0xAAA --target 0xDDD
"""

from __future__ import annotations

import click

from ebsl_reputation import __version__
from ebsl_reputation.cli.paths_cmd import paths_command
from ebsl_reputation.cli.score_cmd import score_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """ebsl-reputation: Evidence-based trust scores for attestation networks.

    Fuse peer attestations with Evidence-Based Subjective Logic into an
    uncertainty-aware opinion and a 0-100 reputation score, globally or
    from the point of view of an observer.
    """


cli.add_command(score_command)
cli.add_command(paths_command)
