"""Load attestations from JSON or YAML files.

The data layer exports attestations as a list of records, or as an object
holding that list under ``attestations``. Records use the application's
camelCase keys (``trustLevel``, ``isActive``) or snake_case; see
:meth:`Attestation.from_dict`.

YAML is selected by the ``.yaml`` / ``.yml`` extension; every other file is
read as JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ebsl_reputation.exceptions import AttestationLoadError

from .models import Attestation

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _parse_document(path: Path, raw: str) -> Any:
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise AttestationLoadError(f"Malformed YAML in {path}: {exc}") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise AttestationLoadError(f"Malformed JSON in {path}: {exc}") from exc


def parse_attestations(document: Any, source: str = "<document>") -> list[Attestation]:
    """Turn a decoded document into attestations.

    Raises:
        AttestationLoadError: If the document does not hold a list of
            records or a record cannot be converted.
    """
    if isinstance(document, dict):
        document = document.get("attestations")
    if not isinstance(document, list):
        raise AttestationLoadError(
            f"{source}: expected a list of attestations or an object with an "
            "'attestations' list"
        )

    attestations: list[Attestation] = []
    for index, record in enumerate(document):
        if not isinstance(record, dict):
            raise AttestationLoadError(
                f"{source}: record {index} is {type(record).__name__}, expected an object"
            )
        try:
            attestations.append(Attestation.from_dict(record))
        except ValueError as exc:
            raise AttestationLoadError(f"{source}: record {index}: {exc}") from exc
    return attestations


def load_attestations(path: str | Path) -> list[Attestation]:
    """Read and parse an attestation file.

    Args:
        path: JSON or YAML file exported by the data layer.

    Returns:
        The attestations in file order, inactive ones included.

    Raises:
        AttestationLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AttestationLoadError(f"Cannot read {path}: {exc}") from exc

    attestations = parse_attestations(_parse_document(path, raw), str(path))
    logger.debug("Loaded %d attestation(s) from %s", len(attestations), path)
    return attestations
