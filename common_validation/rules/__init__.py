"""Rules — check entries, property/value rules and the fluent compiler."""

from common_validation.rules.builder import PropertyRuleBuilder, RuleBuilder, ValueRuleBuilder
from common_validation.rules.check import CheckEntry, resolve_severity
from common_validation.rules.rule import PropertyAccessor, Rule

__all__ = [
    "CheckEntry",
    "PropertyAccessor",
    "PropertyRuleBuilder",
    "Rule",
    "RuleBuilder",
    "ValueRuleBuilder",
    "resolve_severity",
]
