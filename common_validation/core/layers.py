"""Type-level layer declaration.

A target type names its default validation layer with the
``@validation_layer`` decorator (or ``register_layer`` for types you do not
own). The declaration is inherited: resolving a type walks its MRO and
returns the first registered layer. Validators resolve once at construction
and cache the result.
"""

from typing import Callable, Optional, TypeVar

from common_validation.errors import MissingArgumentError

T = TypeVar("T", bound=type)

# type -> layer name, populated by the decorator
_LAYER_REGISTRY: dict[type, str] = {}


def register_layer(cls: type, layer: str) -> None:
    """Declare the default validation layer for a type."""
    if cls is None:
        raise MissingArgumentError("cls")
    if not layer or not layer.strip():
        raise MissingArgumentError("layer")
    _LAYER_REGISTRY[cls] = layer


def validation_layer(layer: str) -> Callable[[T], T]:
    """Class decorator form of register_layer.

    Usage:
        @validation_layer("entity")
        class PersonEntity:
            ...
    """
    if not layer or not layer.strip():
        raise MissingArgumentError("layer")

    def decorator(cls: T) -> T:
        register_layer(cls, layer)
        return cls

    return decorator


def resolve_type_layer(cls: Optional[type]) -> Optional[str]:
    """Return the layer declared on cls or its nearest base class, if any."""
    if cls is None:
        return None
    for base in getattr(cls, "__mro__", (cls,)):
        layer = _LAYER_REGISTRY.get(base)
        if layer is not None:
            return layer
    return None


def clear_layer(cls: type) -> None:
    """Remove a type's own layer declaration (bases are unaffected)."""
    _LAYER_REGISTRY.pop(cls, None)
