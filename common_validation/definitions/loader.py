"""Definition loader — reads rule-set documents from text, files and directories.

Unlike best-effort loaders, any unreadable or malformed document raises
DefinitionLoadError: a missing rule set must not turn into a validator that
accepts everything.
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import ValidationError as SchemaError

from common_validation.config import Settings, get_settings
from common_validation.definitions.models import ValidationDefinition
from common_validation.errors import DefinitionLoadError, MissingArgumentError

logger = structlog.get_logger()


def load_definition(text: str, source: str = "<string>") -> ValidationDefinition:
    """Parse a rule-set document from a JSON string."""
    if text is None or not text.strip():
        raise MissingArgumentError("text")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DefinitionLoadError(source, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DefinitionLoadError(source, "document root must be a JSON object")
    try:
        definition = ValidationDefinition.model_validate(data)
    except SchemaError as e:
        raise DefinitionLoadError(source, f"document does not match the rule-set schema: {e}") from e

    logger.debug(
        "definition_loaded",
        source=source,
        type=definition.type,
        properties=len(definition.properties),
    )
    return definition


def load_definition_file(path: Union[str, Path]) -> ValidationDefinition:
    """Parse a rule-set document from a JSON file."""
    if path is None or not str(path).strip():
        raise MissingArgumentError("path")
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DefinitionLoadError(str(file_path), str(e)) from e
    return load_definition(text, source=str(file_path))


def load_definitions_from_directory(
    directory: Union[str, Path], pattern: Optional[str] = None
) -> list[ValidationDefinition]:
    """Load every matching document under a directory (recursive), sorted by path.

    Args:
        directory: Directory to scan
        pattern: Glob pattern. Defaults to settings.DEFINITION_FILE_PATTERN ("*.validation.json").
    """
    if directory is None or not str(directory).strip():
        raise MissingArgumentError("directory")
    root = Path(directory)
    if not root.is_dir():
        raise DefinitionLoadError(str(root), "validation definitions directory not found")

    glob = pattern or get_settings().DEFINITION_FILE_PATTERN
    return [load_definition_file(file) for file in sorted(root.rglob(glob)) if file.is_file()]


def load_configured_definitions(settings: Optional[Settings] = None) -> list[ValidationDefinition]:
    """Load every file or directory listed in settings.DEFINITION_PATHS."""
    settings = settings or get_settings()
    definitions: list[ValidationDefinition] = []
    for entry in settings.DEFINITION_PATHS:
        path = Path(entry)
        if path.is_file():
            definitions.append(load_definition_file(path))
        elif path.is_dir():
            definitions.extend(load_definitions_from_directory(path, settings.DEFINITION_FILE_PATTERN))
        else:
            raise DefinitionLoadError(entry, "configured definition path does not exist")
    return definitions
