"""Built-in check predicates shared by the fluent builders and the JSON registry.

Every predicate returns True when the value is valid. They are pure and
safe to share between threads.
"""

import re
from collections.abc import Sized
from typing import Any, Callable, Optional, Pattern, Union

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"^\+?[\d\s\-\(\)]{7,20}$")


def is_not_null(value: Any) -> bool:
    return value is not None


def is_null(value: Any) -> bool:
    return value is None


def is_not_empty(value: Any) -> bool:
    """None, blank strings and empty collections are empty. Everything else is not."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, Sized):
        return len(value) > 0
    return True


def is_empty(value: Any) -> bool:
    return not is_not_empty(value)


def max_length(value: Any, maximum: int) -> bool:
    # None passes: pair with not_null/not_empty to require a value
    return value is None or (isinstance(value, str) and len(value) <= maximum)


def min_length(value: Any, minimum: int) -> bool:
    return isinstance(value, str) and len(value) >= minimum


def length_between(value: Any, minimum: int, maximum: int) -> bool:
    return isinstance(value, str) and minimum <= len(value) <= maximum


def matches(value: Any, pattern: Union[str, Pattern[str]]) -> bool:
    """True when the pattern is found anywhere in a string value."""
    if not isinstance(value, str):
        return False
    regex = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
    return regex.search(value) is not None


def is_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def is_phone(value: Any) -> bool:
    return isinstance(value, str) and PHONE_PATTERN.fullmatch(value) is not None


def as_number(value: Any) -> Optional[float]:
    """Convert a value to float for numeric comparisons, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def compare(value: Any, threshold: Any, op: Callable[[Any, Any], bool]) -> bool:
    """Apply op(value, threshold). Values that cannot be compared fail the check.

    A numeric threshold compares against as_number(value), so "20" >= 18 holds
    on every path.
    """
    if value is None:
        return False
    if _is_number(threshold):
        number = as_number(value)
        return number is not None and op(number, threshold)
    try:
        return bool(op(value, threshold))
    except TypeError:
        return False


def between(value: Any, lower: Any, upper: Any) -> bool:
    """Inclusive range check with the same conversion rules as compare()."""
    if value is None:
        return False
    if _is_number(lower) and _is_number(upper):
        number = as_number(value)
        return number is not None and lower <= number <= upper
    try:
        return bool(lower <= value <= upper)
    except TypeError:
        return False


def as_text(value: Any) -> Optional[str]:
    """String conversion used by the equal/notEqual registry checks."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
