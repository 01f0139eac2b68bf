"""JSON rule compiler — turns a ValidationDefinition into Rules for a target type.

Every problem (unknown property, unregistered validator type, bad params,
bad severity) raises while compiling, so a misconfigured document never
produces a validator that silently under-validates.
"""

from operator import attrgetter
from typing import Any

from common_validation.core.severity import CascadeMode
from common_validation.definitions.models import RuleDefinition, ValidationDefinition
from common_validation.definitions.registry import ValidatorTypeRegistry, ValuePredicate
from common_validation.definitions.severity_parser import parse_severity
from common_validation.errors import MissingArgumentError
from common_validation.rules.accessors import find_property
from common_validation.rules.check import CheckEntry
from common_validation.rules.rule import Rule


def compile_definition(
    definition: ValidationDefinition,
    target_type: type,
    registry: ValidatorTypeRegistry,
    cascade_mode: CascadeMode = CascadeMode.CONTINUE,
) -> list[Rule]:
    """Compile every declared property into a Rule, in document order.

    Args:
        definition: Parsed rule-set document
        target_type: Type whose properties the document describes
        registry: Validator types available to the document
        cascade_mode: Rule-level cascade applied to each compiled rule

    Returns:
        One Rule per declared property
    """
    if definition is None:
        raise MissingArgumentError("definition")
    if target_type is None:
        raise MissingArgumentError("target_type")
    if registry is None:
        raise MissingArgumentError("registry")

    rules: list[Rule] = []
    for property_name, property_def in definition.properties.items():
        real_name = find_property(target_type, property_name)
        rule = Rule(real_name, attrgetter(real_name), cascade_mode)
        for rule_def in property_def.rules:
            rule.add_entry(compile_rule(rule_def, registry))
        rules.append(rule)
    return rules


def compile_rule(rule_def: RuleDefinition, registry: ValidatorTypeRegistry) -> CheckEntry:
    """Compile one RuleDefinition into the same CheckEntry shape the fluent builder produces."""
    check = registry.resolve(rule_def.validator, rule_def.params)
    entry = CheckEntry(
        predicate=_value_predicate(check),
        message=rule_def.message,
        error_code=rule_def.error_code,
        severity=parse_severity(rule_def.severity),
    )
    for layer, severity in (rule_def.layers or {}).items():
        if not layer.strip():
            raise MissingArgumentError("layer")
        entry.set_layer_severity(layer, parse_severity(severity, default=None))
    return entry


def _value_predicate(check: ValuePredicate):
    def predicate(_owner: Any, value: Any) -> bool:
        return check(value)

    return predicate
