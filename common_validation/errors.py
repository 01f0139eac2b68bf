"""Configuration and programming errors raised by the validation engine.

These are never reported as ValidationFailure entries: they mean the
validator itself is misconfigured, not that the data under test is invalid.
"""

from typing import Any, Optional


class ValidationConfigurationError(Exception):
    """Base class for every setup-time error raised by common_validation."""


class MissingArgumentError(ValidationConfigurationError, ValueError):
    """A required argument was None or blank."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argument '{argument}' is required.")
        self.argument = argument


class TypeMismatchError(ValidationConfigurationError, TypeError):
    """A type-erased entry point received an instance of the wrong type."""

    def __init__(self, expected: type, received: Any) -> None:
        received_name = "None" if received is None else _qualified_name(type(received))
        super().__init__(
            f"Expected instance of type '{_qualified_name(expected)}' but received '{received_name}'."
        )
        self.expected = expected
        self.received = received


class PropertyNotFoundError(ValidationConfigurationError):
    """A rule-set document names a property the target type does not declare."""

    def __init__(self, property_name: str, target_type: type) -> None:
        super().__init__(
            f"Property '{property_name}' not found on type '{_qualified_name(target_type)}'."
        )
        self.property_name = property_name
        self.target_type = target_type


class ValidatorTypeNotRegisteredError(ValidationConfigurationError):
    """A rule-set document names a validator type missing from the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Validator type '{name}' is not registered.")
        self.name = name


class InvalidSeverityError(ValidationConfigurationError):
    """A severity string could not be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unknown severity value: '{value}'. "
            "Expected: 'forbidden', 'atOwnRisk', or 'notRecommended'."
        )
        self.value = value


class InvalidParameterError(ValidationConfigurationError):
    """A validator type received missing or malformed parameters."""

    def __init__(self, parameter: str, detail: str, validator: Optional[str] = None) -> None:
        prefix = f"Validator '{validator}': " if validator else ""
        super().__init__(f"{prefix}Parameter '{parameter}' {detail}")
        self.parameter = parameter
        self.detail = detail
        self.validator = validator


class RuleConfigurationError(ValidationConfigurationError):
    """A fluent rule chain was used incorrectly."""


class DefinitionLoadError(ValidationConfigurationError):
    """A rule-set document could not be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to load validation definition from {source}: {reason}")
        self.source = source
        self.reason = reason


def _qualified_name(cls: type) -> str:
    module = getattr(cls, "__module__", None)
    if module in (None, "builtins"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"
