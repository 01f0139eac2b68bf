"""Parses severity strings from rule-set documents."""

from typing import Optional

from common_validation.core.severity import Severity
from common_validation.errors import InvalidSeverityError

_SEVERITY_NAMES = {
    "forbidden": Severity.FORBIDDEN,
    "atownrisk": Severity.AT_OWN_RISK,
    "at_own_risk": Severity.AT_OWN_RISK,
    "atown_risk": Severity.AT_OWN_RISK,
    "notrecommended": Severity.NOT_RECOMMENDED,
    "not_recommended": Severity.NOT_RECOMMENDED,
}


def parse_severity(value: Optional[str], default: Optional[Severity] = Severity.FORBIDDEN) -> Severity:
    """Parse a severity string (case-insensitive).

    Args:
        value: Severity string, e.g. "atOwnRisk"
        default: Returned for a missing/blank value. Pass None to make the value required.

    Returns:
        The parsed Severity

    Raises:
        InvalidSeverityError: unknown spelling, or blank when no default is allowed
    """
    if value is None or not value.strip():
        if default is None:
            raise InvalidSeverityError(value or "")
        return default

    severity = _SEVERITY_NAMES.get(value.strip().lower())
    if severity is None:
        raise InvalidSeverityError(value)
    return severity
