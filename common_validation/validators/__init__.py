"""Validators — fluent, standalone-value and shared base classes."""

from common_validation.validators.base import BaseValidator, RuleSetValidator
from common_validation.validators.fluent import AbstractValidator
from common_validation.validators.value import ValueValidator

__all__ = [
    "AbstractValidator",
    "BaseValidator",
    "RuleSetValidator",
    "ValueValidator",
]
