"""Property accessors — one function type for both compilation paths.

The fluent path builds an accessor from a caller-supplied attribute name or
callable. The JSON path locates a declared property by case-insensitive
name on the target type and builds an accessor from the real name.
Evaluation only ever sees the resulting ``(instance) -> value`` callable.
"""

import ast
import dataclasses
import inspect
import textwrap
from operator import attrgetter
from typing import Any, Callable, Optional, Union

from common_validation.errors import MissingArgumentError, PropertyNotFoundError, RuleConfigurationError

PropertyAccessor = Callable[[Any], Any]


def accessor_for(
    accessor: Union[str, PropertyAccessor],
    property_name: Optional[str] = None,
    target_type: Optional[type] = None,
) -> tuple[str, PropertyAccessor]:
    """Normalize a fluent accessor into (property name, accessor).

    Args:
        accessor: Attribute name (dotted paths allowed) or a callable taking the instance.
        property_name: Name used in failure reports. Required for lambdas.
        target_type: When given, the first segment of an attribute name must be a
            declared property of this type (matched case-insensitively).

    Returns:
        The reporting name and the accessor function.
    """
    if accessor is None:
        raise MissingArgumentError("accessor")

    if isinstance(accessor, str):
        if not accessor.strip():
            raise MissingArgumentError("accessor")
        path = accessor
        if target_type is not None:
            head, _, rest = accessor.partition(".")
            real_name = find_property(target_type, head)
            path = f"{real_name}.{rest}" if rest else real_name
        return property_name or path, attrgetter(path)

    if not callable(accessor):
        raise RuleConfigurationError(f"Accessor must be an attribute name or a callable, got {accessor!r}.")

    name = property_name or getattr(accessor, "__name__", None)
    if not name or name == "<lambda>":
        raise RuleConfigurationError("A property_name is required when the accessor is a lambda.")
    return name, accessor


def declared_properties(target_type: type) -> dict[str, str]:
    """Map casefolded property names to their real names for a type.

    Looks at pydantic fields, dataclass fields, annotations across the MRO,
    property descriptors, __slots__ and attributes assigned on self in __init__.
    """
    names: list[str] = []

    model_fields = getattr(target_type, "model_fields", None)
    if isinstance(model_fields, dict):
        names.extend(model_fields)

    if dataclasses.is_dataclass(target_type):
        names.extend(f.name for f in dataclasses.fields(target_type))

    for base in reversed(getattr(target_type, "__mro__", (target_type,))):
        if base is object:
            continue
        namespace = vars(base)
        names.extend(_own_annotations(base))
        names.extend(key for key, value in namespace.items() if isinstance(value, property))
        slots = namespace.get("__slots__", ())
        names.extend([slots] if isinstance(slots, str) else slots)

    names.extend(_stored_attributes(target_type))

    found: dict[str, str] = {}
    for name in names:
        if name.startswith("_"):
            continue
        found.setdefault(name.casefold(), name)
    return found


def find_property(target_type: type, property_name: str) -> str:
    """Return the real name of a declared property, matched case-insensitively."""
    if not property_name or not property_name.strip():
        raise MissingArgumentError("property_name")
    real_name = declared_properties(target_type).get(property_name.casefold())
    if real_name is None:
        raise PropertyNotFoundError(property_name, target_type)
    return real_name


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(cls)
    except NameError:
        # unresolved forward references
        return {}


def _stored_attributes(target_type: type) -> list[str]:
    """Attributes assigned on the instance by any __init__ along the MRO."""
    names: list[str] = []
    for base in getattr(target_type, "__mro__", (target_type,)):
        if base is object:
            continue
        init = vars(base).get("__init__")
        if inspect.isfunction(init):
            names.extend(_assigned_on_self(init))
    return names


def _assigned_on_self(func: Callable[..., Any]) -> list[str]:
    code = func.__code__
    if code.co_argcount == 0:
        return []
    receiver = code.co_varnames[0]
    try:
        tree = ast.parse(textwrap.dedent(inspect.getsource(func)))
    except (OSError, TypeError, SyntaxError):
        # generated (dataclass) or source-less __init__
        return []
    return [
        node.attr
        for node in ast.walk(tree)
        if isinstance(node, ast.Attribute)
        and isinstance(node.ctx, ast.Store)
        and isinstance(node.value, ast.Name)
        and node.value.id == receiver
    ]
