"""JSON-driven validator — builds its rules from a rule-set document at construction.

Usage:
    definition = load_definition_file("rules/user.validation.json")
    validator = JsonValidator(definition, User)
    result = validator.validate(user, ValidationContext.for_layer("entity"))
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from common_validation.core.severity import CascadeMode
from common_validation.definitions.compiler import compile_definition
from common_validation.definitions.loader import load_definition_file
from common_validation.definitions.models import ValidationDefinition
from common_validation.definitions.registry import ValidatorTypeRegistry
from common_validation.errors import MissingArgumentError
from common_validation.validators.base import RuleSetValidator, T

logger = structlog.get_logger()


class JsonValidator(RuleSetValidator[T]):
    """Validator whose rules come from a ValidationDefinition.

    Each compiled rule always runs every check (rule-level CONTINUE);
    cascade_mode controls only whether later properties run after a
    property has failed.
    """

    def __init__(
        self,
        definition: ValidationDefinition,
        validated_type: type,
        registry: Optional[ValidatorTypeRegistry] = None,
        cascade_mode: Optional[CascadeMode] = None,
    ):
        if definition is None:
            raise MissingArgumentError("definition")
        super().__init__(validated_type, cascade_mode)
        self.definition = definition
        self.registry = registry if registry is not None else ValidatorTypeRegistry()

        if definition.type != validated_type.__name__:
            logger.warning(
                "definition_type_mismatch",
                declared_type=definition.type,
                validated_type=validated_type.__name__,
            )

        for rule in compile_definition(definition, validated_type, self.registry):
            self._add_rule(rule)

        logger.info(
            "json_rules_compiled",
            validator=self.name,
            validated_type=validated_type.__name__,
            properties=len(self._rules),
            checks=sum(len(rule.entries) for rule in self._rules),
            layer=self.layer,
        )

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        validated_type: type,
        registry: Optional[ValidatorTypeRegistry] = None,
        cascade_mode: Optional[CascadeMode] = None,
    ) -> "JsonValidator":
        return cls(load_definition_file(path), validated_type, registry, cascade_mode)
