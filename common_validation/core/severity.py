"""Severity levels and cascade modes.

Enum values are the wire spellings used by rule-set documents, so a
Severity serializes to the same string on every side of the contract.
"""

from enum import Enum


class Severity(str, Enum):
    """How serious a failing check is. Drives caller policy, not engine control flow."""

    NOT_RECOMMENDED = "notRecommended"  # Technically valid, informational only
    AT_OWN_RISK = "atOwnRisk"           # Risky, caller accepts the consequences
    FORBIDDEN = "forbidden"             # Invalid, the operation must not proceed

    @property
    def ordinal(self) -> int:
        """Stable serialization ordinal (0, 1, 2). Not used for comparisons."""
        return _ORDINALS[self]


_ORDINALS = {
    Severity.NOT_RECOMMENDED: 0,
    Severity.AT_OWN_RISK: 1,
    Severity.FORBIDDEN: 2,
}


class CascadeMode(str, Enum):
    """Whether evaluation continues after the first failure."""

    CONTINUE = "continue"
    STOP_ON_FIRST_FAILURE = "stopOnFirstFailure"
