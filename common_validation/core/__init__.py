"""Core value types shared by every compilation path."""

from common_validation.core.context import ValidationContext
from common_validation.core.layers import register_layer, resolve_type_layer, validation_layer
from common_validation.core.models import ValidationFailure, ValidationResult
from common_validation.core.severity import CascadeMode, Severity

__all__ = [
    "CascadeMode",
    "Severity",
    "ValidationContext",
    "ValidationFailure",
    "ValidationResult",
    "register_layer",
    "resolve_type_layer",
    "validation_layer",
]
