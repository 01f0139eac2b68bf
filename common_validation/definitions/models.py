"""Rule-set document models.

Field names and aliases are the wire contract shared with client-side
engines: ``$schema``, ``type``, ``properties``, ``rules``, ``validator``,
``params``, ``message``, ``errorCode``, ``severity``, ``layers``.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class RuleDefinition(BaseModel):
    """A single declared rule on a property; compiled 1:1 into a CheckEntry."""

    validator: str = Field(min_length=1, description="Registered validator type name, e.g. 'notEmpty'")
    params: Optional[dict[str, Any]] = Field(default=None, description="Validator parameters, e.g. {'max': 100}")
    message: str
    error_code: Optional[str] = Field(default=None, alias="errorCode")
    severity: Optional[str] = Field(default=None, description="'forbidden', 'atOwnRisk' or 'notRecommended'")
    layers: Optional[dict[str, str]] = Field(default=None, description="Layer name -> severity string")

    model_config = {"populate_by_name": True}


class PropertyDefinition(BaseModel):
    """The ordered rules declared for one property."""

    rules: list[RuleDefinition] = Field(default_factory=list)


class ValidationDefinition(BaseModel):
    """A complete rule-set document for one target type."""

    schema_uri: Optional[str] = Field(default=None, alias="$schema")
    type: str
    properties: dict[str, PropertyDefinition] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

    def to_json(self) -> str:
        """Serialize back to the wire format (aliases, no unset optionals)."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
