"""Base validators — the evaluation loop shared by the fluent and JSON paths.

BaseValidator is the minimal contract (validate + type-erased entry point +
property-scoped evaluation with a post-hoc filtering fallback).
RuleSetValidator runs an ordered list of compiled Rules and is what every
built-in validator derives from.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Optional, TypeVar

import structlog

from common_validation.config import get_settings
from common_validation.core.context import ValidationContext
from common_validation.core.layers import resolve_type_layer
from common_validation.core.models import ValidationFailure, ValidationResult
from common_validation.core.severity import CascadeMode
from common_validation.errors import MissingArgumentError, TypeMismatchError
from common_validation.rules.check import as_cascade_mode
from common_validation.rules.rule import Rule

logger = structlog.get_logger()

T = TypeVar("T")


class BaseValidator(ABC, Generic[T]):
    """Abstract base for all validators.

    Contract:
        - validate() never raises for invalid data; failures go in the result
        - configuration errors raise ValidationConfigurationError subclasses
        - validate() is synchronous and holds no per-call state on self
    """

    def __init__(self, validated_type: type, cascade_mode: Optional[CascadeMode] = None):
        if validated_type is None:
            raise MissingArgumentError("validated_type")
        self.validated_type = validated_type
        if cascade_mode is None:
            cascade_mode = get_settings().DEFAULT_CASCADE_MODE
        self.cascade_mode = as_cascade_mode(cascade_mode)

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    @abstractmethod
    def validate(self, instance: T, context: Optional[ValidationContext] = None) -> ValidationResult:
        """Validate an instance of the bound type.

        Args:
            instance: The object to validate
            context: Optional context carrying the active layer and custom items

        Returns:
            ValidationResult with every failure, in rule registration order
        """
        ...

    def validate_object(self, instance: Any, context: Optional[ValidationContext] = None) -> ValidationResult:
        """Type-erased entry point. Rejects instances that are not of the bound type."""
        if instance is None:
            raise MissingArgumentError("instance")
        if not isinstance(instance, self.validated_type):
            raise TypeMismatchError(self.validated_type, instance)
        return self.validate(instance, context)

    def validate_property(
        self, instance: T, property_name: str, context: Optional[ValidationContext] = None
    ) -> ValidationResult:
        """Validate a single property.

        This default runs the full validation and filters the failures by
        property name afterwards. Validators that can skip unrelated rules
        override it.
        """
        if not property_name:
            raise MissingArgumentError("property_name")
        full = self.validate(instance, context)
        wanted = property_name.casefold()
        return ValidationResult(errors=tuple(e for e in full.errors if e.property_name.casefold() == wanted))


class RuleSetValidator(BaseValidator[T]):
    """Runs an ordered list of Rules with validator-level cascade.

    The type-level layer of the bound type is resolved once here and cached.
    """

    def __init__(self, validated_type: type, cascade_mode: Optional[CascadeMode] = None):
        super().__init__(validated_type, cascade_mode)
        self.layer: Optional[str] = resolve_type_layer(validated_type)
        self._rules: list[Rule] = []

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def _add_rule(self, rule: Rule) -> Rule:
        self._rules.append(rule)
        return rule

    def resolve_layer(self, context: Optional[ValidationContext]) -> Optional[str]:
        """Explicit context layer, else the cached type-level layer, else None."""
        if context is not None and context.layer is not None:
            return context.layer
        return self.layer

    def validate(self, instance: T, context: Optional[ValidationContext] = None) -> ValidationResult:
        self._check_subject(instance)
        return self._run(instance, self._rules, context)

    def validate_property(
        self, instance: T, property_name: str, context: Optional[ValidationContext] = None
    ) -> ValidationResult:
        """Validate only the rules bound to property_name (case-insensitive).

        Other rules are never executed.
        """
        self._check_subject(instance)
        if not property_name:
            raise MissingArgumentError("property_name")
        scoped = [rule for rule in self._rules if rule.matches_property(property_name)]
        return self._run(instance, scoped, context)

    # ── Evaluation ──

    def _check_subject(self, instance: Any) -> None:
        if instance is None:
            raise MissingArgumentError("instance")

    def _evaluate_rule(self, rule: Rule, subject: Any, layer: Optional[str]) -> list[ValidationFailure]:
        return rule.validate(subject, layer)

    def _run(
        self, subject: Any, rules: Iterable[Rule], context: Optional[ValidationContext]
    ) -> ValidationResult:
        if context is not None and not isinstance(context, ValidationContext):
            raise TypeMismatchError(ValidationContext, context)

        start_time = time.perf_counter()
        layer = self.resolve_layer(context)

        failures: list[ValidationFailure] = []
        rules_run = 0
        for rule in rules:
            failures.extend(self._evaluate_rule(rule, subject, layer))
            rules_run += 1

            # Validator-level cascade stops only after a whole rule has run
            if self.cascade_mode == CascadeMode.STOP_ON_FIRST_FAILURE and failures:
                break

        result = ValidationResult(errors=tuple(failures))

        logger.debug(
            "validation_complete",
            validator=self.name,
            validated_type=self.validated_type.__name__,
            layer=layer,
            rules_run=rules_run,
            total_errors=len(failures),
            summary=result.summary(),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return result
