"""Validator type registry — maps validator names in rule-set documents to check factories.

A factory receives the rule's ``params`` object (or None) and returns a
predicate ``(value) -> bool``. Names are case-insensitive and a later
registration overwrites an earlier one. Create one registry per validator
(or per application); there is no process-wide instance.
"""

import operator
import re
from typing import Any, Callable, Optional

import structlog

from common_validation.errors import InvalidParameterError, MissingArgumentError, ValidatorTypeNotRegisteredError
from common_validation.rules import predicates

logger = structlog.get_logger()

ValuePredicate = Callable[[Any], bool]
CheckFactory = Callable[[Optional[dict[str, Any]]], ValuePredicate]


class ValidatorTypeRegistry:
    """Registry of named check factories with the built-in set pre-registered."""

    def __init__(self) -> None:
        # casefolded name -> (registered name, factory)
        self._factories: dict[str, tuple[str, CheckFactory]] = {}
        self._register_builtins()

    def register(self, name: str, factory: CheckFactory) -> None:
        """Add or override a validator type."""
        if not name or not name.strip():
            raise MissingArgumentError("name")
        if factory is None:
            raise MissingArgumentError("factory")
        overrides = name.casefold() in self._factories
        self._factories[name.casefold()] = (name, factory)
        logger.debug("validator_type_registered", name=name, overrides=overrides)

    def resolve(self, name: str, params: Optional[dict[str, Any]] = None) -> ValuePredicate:
        """Build the predicate for a named validator type.

        Raises:
            ValidatorTypeNotRegisteredError: name is unknown
            InvalidParameterError: params are missing or malformed
        """
        if not name:
            raise MissingArgumentError("name")
        entry = self._factories.get(name.casefold())
        if entry is None:
            raise ValidatorTypeNotRegisteredError(name)
        registered_name, factory = entry
        try:
            return factory(params)
        except InvalidParameterError as e:
            if e.validator is None:
                raise InvalidParameterError(e.parameter, e.detail, registered_name) from e
            raise

    def is_registered(self, name: str) -> bool:
        return bool(name) and name.casefold() in self._factories

    def names(self) -> list[str]:
        """Registered validator type names, in registration order."""
        return [registered for registered, _ in self._factories.values()]

    # ── Built-ins ──

    def _register_builtins(self) -> None:
        builtins: dict[str, CheckFactory] = {
            "notNull": lambda _: predicates.is_not_null,
            "null": lambda _: predicates.is_null,
            "notEmpty": lambda _: predicates.is_not_empty,
            "empty": lambda _: predicates.is_empty,
            "maxLength": _max_length,
            "minLength": _min_length,
            "length": _length,
            "email": lambda _: predicates.is_email,
            "phone": lambda _: predicates.is_phone,
            "matches": _matches,
            "equal": _equal,
            "notEqual": _not_equal,
            "greaterThan": _numeric(operator.gt),
            "greaterThanOrEqual": _numeric(operator.ge),
            "lessThan": _numeric(operator.lt),
            "lessThanOrEqual": _numeric(operator.le),
            "inclusiveBetween": _inclusive_between,
        }
        for name, factory in builtins.items():
            self._factories[name.casefold()] = (name, factory)


# ── Factories ──

def _max_length(params: Optional[dict[str, Any]]) -> ValuePredicate:
    maximum = _required_int(params, "max")
    return lambda v: predicates.max_length(v, maximum)


def _min_length(params: Optional[dict[str, Any]]) -> ValuePredicate:
    minimum = _required_int(params, "min")
    return lambda v: predicates.min_length(v, minimum)


def _length(params: Optional[dict[str, Any]]) -> ValuePredicate:
    minimum = _required_int(params, "min")
    maximum = _required_int(params, "max")
    return lambda v: predicates.length_between(v, minimum, maximum)


def _matches(params: Optional[dict[str, Any]]) -> ValuePredicate:
    pattern = _required_str(params, "pattern")
    try:
        regex = re.compile(pattern)
    except re.error as e:
        raise InvalidParameterError("pattern", f"is not a valid regular expression: {e}") from e
    return lambda v: predicates.matches(v, regex)


def _equal(params: Optional[dict[str, Any]]) -> ValuePredicate:
    expected = _required_scalar_text(params, "value")
    return lambda v: predicates.as_text(v) == expected


def _not_equal(params: Optional[dict[str, Any]]) -> ValuePredicate:
    expected = _required_scalar_text(params, "value")
    return lambda v: predicates.as_text(v) != expected


def _numeric(compare: Callable[[float, float], bool]) -> CheckFactory:
    def factory(params: Optional[dict[str, Any]]) -> ValuePredicate:
        threshold = _required_number(params, "value")
        return lambda v: predicates.compare(v, threshold, compare)

    return factory


def _inclusive_between(params: Optional[dict[str, Any]]) -> ValuePredicate:
    lower = _required_number(params, "from")
    upper = _required_number(params, "to")
    return lambda v: predicates.between(v, lower, upper)


# ── Parameter helpers ──

def _required(params: Optional[dict[str, Any]], name: str) -> Any:
    if not params or name not in params or params[name] is None:
        raise InvalidParameterError(name, "is required.")
    return params[name]


def _required_int(params: Optional[dict[str, Any]], name: str) -> int:
    value = _required(params, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(name, "must be an integer.")
    return value


def _required_str(params: Optional[dict[str, Any]], name: str) -> str:
    value = _required(params, name)
    if not isinstance(value, str):
        raise InvalidParameterError(name, "must be a string.")
    return value


def _required_number(params: Optional[dict[str, Any]], name: str) -> float:
    value = _required(params, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(name, "must be a number.")
    return float(value)


def _required_scalar_text(params: Optional[dict[str, Any]], name: str) -> str:
    value = _required(params, name)
    if not isinstance(value, (str, int, float, bool)):
        raise InvalidParameterError(name, "must be a string, number or boolean.")
    return predicates.as_text(value)
