"""Fluent rule compiler.

Each check method appends exactly one CheckEntry with a built-in default
message. Modifier methods (with_message, with_severity, ...) retarget the
entry at ``current_entry_index``, which always points at the most recently
appended entry. No ordering is enforced; any sequence of calls is legal.

Usage:
    rule_for("email").not_empty().with_message("Email is required.") \\
        .email_address().with_severity(Severity.AT_OWN_RISK) \\
        .with_layer_severity("entity", Severity.NOT_RECOMMENDED)
"""

import operator
import re
from typing import Any, Callable, Optional, Pattern, Self, Union

from common_validation.core.severity import CascadeMode, Severity
from common_validation.errors import MissingArgumentError, RuleConfigurationError
from common_validation.rules import predicates
from common_validation.rules.check import CheckEntry, CheckPredicate, as_cascade_mode, as_severity
from common_validation.rules.rule import Rule

DEFAULT_MUST_MESSAGE = "did not satisfy the specified condition."


class RuleBuilder:
    """Shared fluent surface for property and value rules."""

    def __init__(self, rule: Rule):
        if rule is None:
            raise MissingArgumentError("rule")
        self.rule = rule
        self.current_entry_index: Optional[int] = None

    # ── Core ──

    def add_check(self, predicate: Callable[[Any], bool], message: str) -> Self:
        """Append a check over the value alone."""
        if predicate is None:
            raise MissingArgumentError("predicate")
        return self._append(lambda _owner, value: predicate(value), message)

    def _append(self, predicate: CheckPredicate, message: str) -> Self:
        self.current_entry_index = self.rule.append(predicate, message)
        return self

    def _describe(self, message: str) -> str:
        """Default message for a built-in check, prefixed with the property name."""
        return f"{self.rule.property_name} {message}"

    def _current_entry(self, modifier: str) -> CheckEntry:
        if self.current_entry_index is None:
            raise RuleConfigurationError(
                f"'{modifier}' was called on rule '{self.rule.property_name}' before any check was added."
            )
        return self.rule.entry_at(self.current_entry_index)

    # ── Modifiers (act on the most recent entry) ──

    def with_message(self, message: str) -> Self:
        if message is None:
            raise MissingArgumentError("message")
        self._current_entry("with_message").message = message
        return self

    def with_error_code(self, error_code: str) -> Self:
        if error_code is None:
            raise MissingArgumentError("error_code")
        self._current_entry("with_error_code").error_code = error_code
        return self

    def with_severity(self, severity: Severity) -> Self:
        self._current_entry("with_severity").severity = as_severity(severity)
        return self

    def with_layer_severity(self, layer: str, severity: Severity) -> Self:
        """Override the severity of the most recent check when evaluated in `layer`."""
        if not layer or not layer.strip():
            raise MissingArgumentError("layer")
        self._current_entry("with_layer_severity").set_layer_severity(layer, as_severity(severity))
        return self

    # ── Rule-level settings ──

    def cascade(self, cascade_mode: CascadeMode) -> Self:
        self.rule.cascade_mode = as_cascade_mode(cascade_mode)
        return self

    def when(self, condition: Callable[[Any], bool]) -> Self:
        """Apply every check appended from now on only when condition holds."""
        if condition is None:
            raise MissingArgumentError("condition")
        self.rule.current_condition = self._gate(condition)
        return self

    def unless(self, condition: Callable[[Any], bool]) -> Self:
        """Skip every check appended from now on when condition holds."""
        if condition is None:
            raise MissingArgumentError("condition")
        gate = self._gate(condition)
        self.rule.current_condition = lambda owner, value: not gate(owner, value)
        return self

    def _gate(self, condition: Callable[[Any], bool]) -> Callable[[Any, Any], bool]:
        raise NotImplementedError

    # ── Common checks ──

    def not_null(self) -> Self:
        return self.add_check(predicates.is_not_null, self._describe("must not be null."))

    def null(self) -> Self:
        return self.add_check(predicates.is_null, self._describe("must be null."))

    def not_empty(self) -> Self:
        return self.add_check(predicates.is_not_empty, self._describe("must not be empty."))

    def empty(self) -> Self:
        return self.add_check(predicates.is_empty, self._describe("must be empty."))

    def equal(self, comparison_value: Any) -> Self:
        return self.add_check(
            lambda v: v == comparison_value,
            self._describe(f"must equal '{comparison_value}'."),
        )

    def not_equal(self, comparison_value: Any) -> Self:
        return self.add_check(
            lambda v: v != comparison_value,
            self._describe(f"must not equal '{comparison_value}'."),
        )

    def must(self, predicate: Callable[[Any], bool], message: Optional[str] = None) -> Self:
        return self.add_check(predicate, message or self._describe(DEFAULT_MUST_MESSAGE))

    # ── String checks ──

    def max_length(self, maximum: int) -> Self:
        return self.add_check(
            lambda v: predicates.max_length(v, maximum),
            self._describe(f"must be at most {maximum} characters long."),
        )

    def min_length(self, minimum: int) -> Self:
        return self.add_check(
            lambda v: predicates.min_length(v, minimum),
            self._describe(f"must be at least {minimum} characters long."),
        )

    def length(self, minimum: int, maximum: int) -> Self:
        return self.add_check(
            lambda v: predicates.length_between(v, minimum, maximum),
            self._describe(f"must be between {minimum} and {maximum} characters long."),
        )

    def matches(self, pattern: Union[str, Pattern[str]]) -> Self:
        if isinstance(pattern, re.Pattern):
            return self.add_check(
                lambda v: predicates.matches(v, pattern),
                self._describe("must match the required pattern."),
            )
        if not pattern:
            raise MissingArgumentError("pattern")
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise RuleConfigurationError(f"Invalid pattern '{pattern}': {e}") from e
        return self.add_check(
            lambda v: predicates.matches(v, regex),
            self._describe(f"must match the pattern '{pattern}'."),
        )

    def email_address(self) -> Self:
        return self.add_check(predicates.is_email, self._describe("must be a valid email address."))

    def phone_number(self) -> Self:
        return self.add_check(predicates.is_phone, self._describe("must be a valid phone number."))

    # ── Comparison checks ──
    # None and values that cannot be compared with the threshold fail.

    def greater_than(self, threshold: Any) -> Self:
        return self.add_check(
            lambda v: predicates.compare(v, threshold, operator.gt),
            self._describe(f"must be greater than {threshold}."),
        )

    def greater_than_or_equal(self, threshold: Any) -> Self:
        return self.add_check(
            lambda v: predicates.compare(v, threshold, operator.ge),
            self._describe(f"must be greater than or equal to {threshold}."),
        )

    def less_than(self, threshold: Any) -> Self:
        return self.add_check(
            lambda v: predicates.compare(v, threshold, operator.lt),
            self._describe(f"must be less than {threshold}."),
        )

    def less_than_or_equal(self, threshold: Any) -> Self:
        return self.add_check(
            lambda v: predicates.compare(v, threshold, operator.le),
            self._describe(f"must be less than or equal to {threshold}."),
        )

    def inclusive_between(self, lower: Any, upper: Any) -> Self:
        return self.add_check(
            lambda v: predicates.between(v, lower, upper),
            self._describe(f"must be between {lower} and {upper} (inclusive)."),
        )


class PropertyRuleBuilder(RuleBuilder):
    """Builder for a rule bound to a property; gates see the owning object."""

    def add_check_with_owner(self, predicate: Callable[[Any, Any], bool], message: str) -> Self:
        """Append a check that also receives the owning object: predicate(owner, value)."""
        if predicate is None:
            raise MissingArgumentError("predicate")
        return self._append(predicate, message)

    def must_with_owner(
        self, predicate: Callable[[Any, Any], bool], message: Optional[str] = None
    ) -> Self:
        return self.add_check_with_owner(predicate, message or self._describe(DEFAULT_MUST_MESSAGE))

    def _gate(self, condition: Callable[[Any], bool]) -> Callable[[Any, Any], bool]:
        return lambda owner, _value: condition(owner)


class ValueRuleBuilder(RuleBuilder):
    """Builder for a standalone value rule; gates see the value itself."""

    def _gate(self, condition: Callable[[Any], bool]) -> Callable[[Any, Any], bool]:
        return lambda _owner, value: condition(value)
