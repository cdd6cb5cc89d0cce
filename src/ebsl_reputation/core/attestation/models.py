"""Attestation records and the attester graph type.

An attestation is a claim one address makes about another: "I trust
``subject`` at ``trust_level`` out of 100". Attestations are produced and
verified by the data layer (contract reads, event indexing); the engine only
reads them.

Addresses arrive in mixed case from external sources, so every comparison
inside the engine goes through :func:`normalize_address`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Accepted spellings for each field, snake_case first.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "attester": ("attester",),
    "subject": ("subject",),
    "trust_level": ("trust_level", "trustLevel"),
    "comment": ("comment",),
    "timestamp": ("timestamp",),
    "is_active": ("is_active", "isActive"),
}


def normalize_address(address: str) -> str:
    """Return the canonical (stripped, lower-case) form of an address."""
    return address.strip().lower()


def _lookup(record: dict[str, Any], field: str) -> Any:
    for key in _FIELD_ALIASES[field]:
        if key in record:
            return record[key]
    return None


_TRUE_STRINGS = frozenset({"true", "yes", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "0"})


def _parse_flag(value: Any) -> bool:
    """Read an activity flag from a bool, 0/1, or a true/false string.

    Raises:
        ValueError: For any other value.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"Attestation record has an invalid isActive flag: {value!r}")


@dataclass(frozen=True)
class Attestation:
    """A trust claim from ``attester`` about ``subject``.

    Attributes:
        attester: Address making the claim.
        subject: Address the claim is about.
        trust_level: Trust in the subject, 0 (none) to 100 (full).
        comment: Optional free-text note attached by the attester.
        timestamp: Unix seconds when the attestation was made.
        is_active: False once the attester revoked the claim. Inactive
            attestations are ignored by every calculation.
    """

    attester: str
    subject: str
    trust_level: int
    comment: str | None = None
    timestamp: int = 0
    is_active: bool = True

    @property
    def attester_key(self) -> str:
        """Normalized attester address."""
        return normalize_address(self.attester)

    @property
    def subject_key(self) -> str:
        """Normalized subject address."""
        return normalize_address(self.subject)

    @classmethod
    def from_dict(cls, record: dict[str, Any]) -> Attestation:
        """Build an attestation from a camelCase or snake_case record.

        Raises:
            ValueError: If ``attester``, ``subject`` or the trust level is
                missing, a numeric field cannot be converted, or the
                activity flag is not a recognizable true/false value.
        """
        missing = [
            name
            for name in ("attester", "subject", "trust_level")
            if _lookup(record, name) is None
        ]
        if missing:
            raise ValueError(f"Attestation record missing field(s): {', '.join(missing)}")

        comment = _lookup(record, "comment")
        timestamp = _lookup(record, "timestamp")
        is_active = _lookup(record, "is_active")
        try:
            trust_level = int(_lookup(record, "trust_level"))
            ts = int(timestamp) if timestamp is not None else 0
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Attestation record has a non-numeric field: {exc}") from exc

        return cls(
            attester=str(_lookup(record, "attester")),
            subject=str(_lookup(record, "subject")),
            trust_level=trust_level,
            comment=str(comment) if comment is not None else None,
            timestamp=ts,
            is_active=_parse_flag(is_active) if is_active is not None else True,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the attestation in the application's camelCase form."""
        return {
            "attester": self.attester,
            "subject": self.subject,
            "trustLevel": self.trust_level,
            "comment": self.comment,
            "timestamp": self.timestamp,
            "isActive": self.is_active,
        }


# Lower-cased attester address -> active attestations issued, in input order.
AttestationGraph = dict[str, list[Attestation]]
