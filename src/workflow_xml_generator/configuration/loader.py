"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from workflow_xml_generator.requirement_ingestion.requirement_models import (
    DEFAULT_REQUIREMENT_COLUMN,
)
from workflow_xml_generator.workflow_emission.constants import DEFAULT_MANIFEST_FILENAME

from .runtime_settings import GenerationSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GenerationSettings:
    """Load and validate the configuration file.

    Relative paths are resolved against the directory holding the file.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    requirements = _require_mapping(parsed.get("requirements"), "requirements")
    templates = _require_mapping(parsed.get("templates"), "templates")
    output = _require_mapping(parsed.get("output"), "output")

    requirements_path = _require_non_empty_string(requirements.get("path"), "requirements.path")
    sheet_name = _optional_string(requirements.get("sheet"), "requirements.sheet")
    column = _optional_string(requirements.get("column"), "requirements.column")
    template_directory = _require_non_empty_string(
        templates.get("directory"), "templates.directory"
    )
    output_directory = _require_non_empty_string(output.get("directory"), "output.directory")
    manifest = _optional_string(output.get("manifest"), "output.manifest")

    return build_settings(
        requirements_path=_resolve_path(base_path, requirements_path),
        template_directory=_resolve_path(base_path, template_directory),
        output_directory=_resolve_path(base_path, output_directory),
        manifest_path=_resolve_path(base_path, manifest) if manifest else None,
        requirement_column=column,
        sheet_name=sheet_name,
    )


def build_settings(
    *,
    requirements_path: Path | str,
    template_directory: Path | str,
    output_directory: Path | str,
    manifest_path: Path | str | None = None,
    requirement_column: str | None = None,
    sheet_name: str | None = None,
) -> GenerationSettings:
    """Build settings from explicit values, applying defaults."""
    output_dir = Path(output_directory)
    return GenerationSettings(
        requirements_path=Path(requirements_path),
        template_directory=Path(template_directory),
        output_directory=output_dir,
        manifest_path=(
            Path(manifest_path) if manifest_path else output_dir / DEFAULT_MANIFEST_FILENAME
        ),
        requirement_column=requirement_column or DEFAULT_REQUIREMENT_COLUMN,
        sheet_name=sheet_name,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
