"""Rule — the ordered checks bound to one property or one standalone value."""

from typing import Any, Iterator, Optional

from common_validation.core.models import ValidationFailure
from common_validation.core.severity import CascadeMode
from common_validation.errors import MissingArgumentError
from common_validation.rules.accessors import PropertyAccessor
from common_validation.rules.check import (
    CheckEntry,
    CheckPredicate,
    ConditionGate,
    as_cascade_mode,
    resolve_severity,
)


class Rule:
    """Ordered CheckEntry list bound to a property (accessor) or to a bare value.

    Evaluation contract:
        - entries run in registration order
        - an entry whose gate is closed is skipped and never counts as a failure
        - with STOP_ON_FIRST_FAILURE, at most one failure is emitted
    """

    def __init__(
        self,
        property_name: str,
        accessor: Optional[PropertyAccessor] = None,
        cascade_mode: CascadeMode = CascadeMode.CONTINUE,
    ):
        if not property_name:
            raise MissingArgumentError("property_name")
        self.property_name = property_name
        self.accessor = accessor
        self.cascade_mode = as_cascade_mode(cascade_mode)
        self.current_condition: Optional[ConditionGate] = None
        self._entries: list[CheckEntry] = []

    @property
    def entries(self) -> tuple[CheckEntry, ...]:
        return tuple(self._entries)

    def append(self, predicate: CheckPredicate, message: str) -> int:
        """Append an entry capturing the current gate. Returns its index."""
        self._entries.append(
            CheckEntry(predicate=predicate, message=message, condition=self.current_condition)
        )
        return len(self._entries) - 1

    def add_entry(self, entry: CheckEntry) -> int:
        """Append a fully built entry (JSON path)."""
        self._entries.append(entry)
        return len(self._entries) - 1

    def entry_at(self, index: int) -> CheckEntry:
        return self._entries[index]

    def matches_property(self, name: str) -> bool:
        return self.property_name.casefold() == name.casefold()

    def value_of(self, instance: Any) -> Any:
        return self.accessor(instance) if self.accessor is not None else instance

    def validate(self, instance: Any, layer: Optional[str] = None) -> list[ValidationFailure]:
        """Evaluate against an owner object, reading the bound property."""
        return list(self._evaluate(instance, self.value_of(instance), layer))

    def validate_value(self, value: Any, layer: Optional[str] = None) -> list[ValidationFailure]:
        """Evaluate against a standalone value (no owner)."""
        return list(self._evaluate(None, value, layer))

    def _evaluate(self, owner: Any, value: Any, layer: Optional[str]) -> Iterator[ValidationFailure]:
        for entry in self._entries:
            if not entry.applies_to(owner, value):
                continue
            if entry.is_satisfied_by(owner, value):
                continue

            yield ValidationFailure(
                property_name=self.property_name,
                error_message=entry.message,
                error_code=entry.error_code,
                severity=resolve_severity(entry, layer),
                attempted_value=value,
            )

            if self.cascade_mode == CascadeMode.STOP_ON_FIRST_FAILURE:
                return

    def __repr__(self) -> str:
        return f"Rule(property_name={self.property_name!r}, entries={len(self._entries)}, cascade_mode={self.cascade_mode.value!r})"
