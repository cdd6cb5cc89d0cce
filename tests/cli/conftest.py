"""Shared fixtures for CLI tests.

Writes the diamond network (0xAAA -> 0xBBB/0xCCC -> 0xDDD) plus a direct
attestation 0xEEE -> 0xDDD to temporary JSON and YAML files.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

_RECORDS = [
    {"attester": "0xAAA", "subject": "0xBBB", "trustLevel": 80, "timestamp": 1_700_000_000},
    {"attester": "0xAAA", "subject": "0xCCC", "trustLevel": 70, "timestamp": 1_700_000_100},
    {"attester": "0xBBB", "subject": "0xDDD", "trustLevel": 90, "timestamp": 1_700_000_200},
    {"attester": "0xCCC", "subject": "0xDDD", "trustLevel": 85, "timestamp": 1_700_000_300},
    {"attester": "0xEEE", "subject": "0xDDD", "trustLevel": 85, "timestamp": 1_700_000_400},
    {"attester": "0xFFF", "subject": "0xDDD", "trustLevel": 0, "isActive": False},
]


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def attestations_json(tmp_path: Path) -> Path:
    """JSON export holding a bare list of attestation records."""
    path = tmp_path / "attestations.json"
    path.write_text(json.dumps(_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def attestations_yaml(tmp_path: Path) -> Path:
    """YAML export with the records under an ``attestations`` key."""
    path = tmp_path / "attestations.yaml"
    path.write_text(yaml.safe_dump({"attestations": _RECORDS}), encoding="utf-8")
    return path


@pytest.fixture
def malformed_json(tmp_path: Path) -> Path:
    """A file that is not valid JSON."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    return path
