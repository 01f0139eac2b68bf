"""Validation context — the active layer and ambient data for one evaluation call."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ValidationContext(BaseModel):
    """Carries the active layer name and an open bag of custom items.

    Built per call and frozen for the duration of that call.
    """

    layer: Optional[str] = None
    items: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def for_layer(cls, layer: str) -> "ValidationContext":
        """Create a context for a specific layer (e.g. "api", "dto", "entity")."""
        return cls(layer=layer)
