"""Standalone value validator — rules over a bare value, no owning object.

Usage:
    class PhoneValidator(ValueValidator[str]):
        def __init__(self):
            super().__init__(str, "Phone")
            self.check().not_empty().phone_number().with_severity(Severity.AT_OWN_RISK)

    email = ValueValidator.create(str, lambda rule: rule.not_empty().email_address(), "Email")
    result = email.validate("not-an-email")
"""

from typing import Any, Callable, Optional

from common_validation.core.context import ValidationContext
from common_validation.core.models import ValidationFailure, ValidationResult
from common_validation.core.severity import CascadeMode
from common_validation.errors import MissingArgumentError, TypeMismatchError
from common_validation.rules.builder import ValueRuleBuilder
from common_validation.rules.rule import Rule
from common_validation.validators.base import RuleSetValidator, T


class ValueValidator(RuleSetValidator[T]):
    """Validator for a standalone value of one type.

    None is accepted as a value: use not_null()/not_empty() to reject it.
    """

    def __init__(
        self,
        value_type: type,
        default_property_name: Optional[str] = None,
        cascade_mode: Optional[CascadeMode] = None,
    ):
        super().__init__(value_type, cascade_mode)
        self.default_property_name = default_property_name or value_type.__name__

    def check(self, property_name: Optional[str] = None) -> ValueRuleBuilder:
        """Start a new value rule. Failures report property_name or the default name."""
        rule = self._add_rule(Rule(property_name or self.default_property_name))
        return ValueRuleBuilder(rule)

    def validate_object(self, instance: Any, context: Optional[ValidationContext] = None) -> ValidationResult:
        """Type-erased entry point for values."""
        if instance is not None and not isinstance(instance, self.validated_type):
            raise TypeMismatchError(self.validated_type, instance)
        return self.validate(instance, context)

    @classmethod
    def create(
        cls,
        value_type: type,
        configure: Callable[[ValueRuleBuilder], Any],
        property_name: Optional[str] = None,
        cascade_mode: Optional[CascadeMode] = None,
    ) -> "ValueValidator[Any]":
        """Build an inline value validator from a configuration callback."""
        if configure is None:
            raise MissingArgumentError("configure")
        validator: ValueValidator[Any] = cls(value_type, property_name, cascade_mode)
        configure(validator.check())
        return validator

    def _check_subject(self, instance: Any) -> None:
        pass

    def _evaluate_rule(self, rule: Rule, subject: Any, layer: Optional[str]) -> list[ValidationFailure]:
        return rule.validate_value(subject, layer)
