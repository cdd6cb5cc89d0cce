"""ebsl-reputation exception hierarchy.

All public exceptions inherit from ReputationError, giving callers a single
base class to catch when they want to handle any engine-specific failure
without swallowing unrelated errors.

Invalid-input errors also inherit from ValueError so that code written
against plain numeric validation keeps working.
"""


class ReputationError(Exception):
    """Base exception for all ebsl-reputation errors."""


class InvalidOpinionError(ReputationError, ValueError):
    """Raised when an opinion or an operator input is malformed.

    Covers non-finite or out-of-range opinion components, opinions whose
    components do not sum to 1, NaN trust levels, negative evidence counts,
    and scalars outside the range an operator accepts.
    """


class InvalidOptionsError(ReputationError, ValueError):
    """Raised when reputation options fail validation.

    Covers negative depths, weights outside [0, 1], unknown discount
    methods, and non-positive discount thresholds.
    """


class AttestationLoadError(ReputationError):
    """Raised when an attestation file cannot be loaded.

    Covers unreadable files, malformed JSON or YAML documents, and records
    missing required fields.
    """
