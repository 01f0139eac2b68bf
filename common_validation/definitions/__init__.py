"""Definitions — JSON rule-set documents, the validator type registry and the JSON compiler."""

from common_validation.definitions.compiler import compile_definition
from common_validation.definitions.loader import (
    load_configured_definitions,
    load_definition,
    load_definition_file,
    load_definitions_from_directory,
)
from common_validation.definitions.models import PropertyDefinition, RuleDefinition, ValidationDefinition
from common_validation.definitions.registry import CheckFactory, ValidatorTypeRegistry
from common_validation.definitions.severity_parser import parse_severity
from common_validation.definitions.validator import JsonValidator

__all__ = [
    "CheckFactory",
    "JsonValidator",
    "PropertyDefinition",
    "RuleDefinition",
    "ValidationDefinition",
    "ValidatorTypeRegistry",
    "compile_definition",
    "load_configured_definitions",
    "load_definition",
    "load_definition_file",
    "load_definitions_from_directory",
    "parse_severity",
]
