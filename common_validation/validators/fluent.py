"""Fluent validator — subclass and declare rules in __init__.

Usage:
    class PersonValidator(AbstractValidator[Person]):
        def __init__(self):
            super().__init__()
            self.rule_for("email").not_empty().with_message("Email is required.").email_address()
            self.rule_for(lambda p: p.age, "age").greater_than_or_equal(18)

    result = PersonValidator().validate(person)
"""

from typing import Any, Optional, Union, get_args, get_origin

from common_validation.core.severity import CascadeMode
from common_validation.errors import MissingArgumentError
from common_validation.rules.accessors import PropertyAccessor, accessor_for
from common_validation.rules.builder import PropertyRuleBuilder
from common_validation.rules.rule import Rule
from common_validation.validators.base import RuleSetValidator, T


class AbstractValidator(RuleSetValidator[T]):
    """Validator for one type whose rules are built with the fluent builder."""

    def __init__(self, validated_type: Optional[type] = None, cascade_mode: Optional[CascadeMode] = None):
        if validated_type is None:
            validated_type = _infer_validated_type(type(self))
        super().__init__(validated_type, cascade_mode)

    def rule_for(
        self, accessor: Union[str, PropertyAccessor], property_name: Optional[str] = None
    ) -> PropertyRuleBuilder:
        """Start a rule for one property.

        Args:
            accessor: Attribute name (e.g. "email") or a callable taking the instance.
                Attribute names must be declared on the validated type.
            property_name: Name used in failure reports. Required when accessor is a lambda.

        Returns:
            PropertyRuleBuilder for chaining checks and modifiers
        """
        name, getter = accessor_for(accessor, property_name, self.validated_type)
        rule = self._add_rule(Rule(name, getter))
        return PropertyRuleBuilder(rule)


def _infer_validated_type(cls: type) -> type:
    """Read T from `class X(AbstractValidator[T])` anywhere in the class hierarchy."""
    for klass in cls.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            origin = get_origin(base)
            if isinstance(origin, type) and issubclass(origin, AbstractValidator):
                args: tuple[Any, ...] = get_args(base)
                if args and isinstance(args[0], type):
                    return args[0]
    raise MissingArgumentError("validated_type")
