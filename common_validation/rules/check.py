"""Check entries and severity resolution.

A CheckEntry is one compiled rule step. Both the fluent builders and the
JSON compiler produce the same shape, so evaluation and severity
resolution are shared between the two paths.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from common_validation.core.severity import CascadeMode, Severity
from common_validation.errors import RuleConfigurationError

# (owner, value) -> bool. Owner is None for standalone value rules.
CheckPredicate = Callable[[Any, Any], bool]
ConditionGate = Callable[[Any, Any], bool]


@dataclass
class CheckEntry:
    """One predicate plus its message, error code and severity metadata."""

    predicate: CheckPredicate
    message: str
    error_code: Optional[str] = None
    severity: Severity = Severity.FORBIDDEN
    layer_severities: dict[str, Severity] = field(default_factory=dict)
    condition: Optional[ConditionGate] = None

    def set_layer_severity(self, layer: str, severity: Severity) -> None:
        # Layer names are case-insensitive
        self.layer_severities[layer.casefold()] = severity

    def applies_to(self, owner: Any, value: Any) -> bool:
        """False when a captured gate is present and closed."""
        return self.condition is None or bool(self.condition(owner, value))

    def is_satisfied_by(self, owner: Any, value: Any) -> bool:
        return bool(self.predicate(owner, value))


def resolve_severity(entry: CheckEntry, layer: Optional[str]) -> Severity:
    """Return the layer override for the active layer, else the entry's default severity."""
    if layer is not None:
        override = entry.layer_severities.get(layer.casefold())
        if override is not None:
            return override
    return entry.severity


def as_severity(value: Any) -> Severity:
    """Coerce a Severity or its wire spelling, e.g. "atOwnRisk"."""
    try:
        return Severity(value)
    except ValueError as e:
        raise RuleConfigurationError(f"Unknown severity: {value!r}.") from e


def as_cascade_mode(value: Any) -> CascadeMode:
    """Coerce a CascadeMode or its wire spelling, e.g. "stopOnFirstFailure"."""
    try:
        return CascadeMode(value)
    except ValueError as e:
        raise RuleConfigurationError(f"Unknown cascade mode: {value!r}.") from e
