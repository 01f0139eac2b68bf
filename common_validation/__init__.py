"""common_validation — declarative validation with severities, layers and cascade control.

Rules are declared either fluently in code (AbstractValidator, ValueValidator)
or in JSON rule-set documents (JsonValidator). Both paths compile to the same
rule model and produce the same ValidationResult.
"""

from common_validation.core import (
    CascadeMode,
    Severity,
    ValidationContext,
    ValidationFailure,
    ValidationResult,
    register_layer,
    resolve_type_layer,
    validation_layer,
)
from common_validation.definitions import (
    JsonValidator,
    ValidationDefinition,
    ValidatorTypeRegistry,
    load_definition,
    load_definition_file,
    load_definitions_from_directory,
)
from common_validation.errors import (
    DefinitionLoadError,
    InvalidParameterError,
    InvalidSeverityError,
    MissingArgumentError,
    PropertyNotFoundError,
    RuleConfigurationError,
    TypeMismatchError,
    ValidationConfigurationError,
    ValidatorTypeNotRegisteredError,
)
from common_validation.validators import AbstractValidator, BaseValidator, ValueValidator

__version__ = "0.1.0"

__all__ = [
    "AbstractValidator",
    "BaseValidator",
    "CascadeMode",
    "DefinitionLoadError",
    "InvalidParameterError",
    "InvalidSeverityError",
    "JsonValidator",
    "MissingArgumentError",
    "PropertyNotFoundError",
    "RuleConfigurationError",
    "Severity",
    "TypeMismatchError",
    "ValidationConfigurationError",
    "ValidationContext",
    "ValidationDefinition",
    "ValidationFailure",
    "ValidationResult",
    "ValidatorTypeNotRegisteredError",
    "ValidatorTypeRegistry",
    "ValueValidator",
    "load_definition",
    "load_definition_file",
    "load_definitions_from_directory",
    "register_layer",
    "resolve_type_layer",
    "validation_layer",
]
