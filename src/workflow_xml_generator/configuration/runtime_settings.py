"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from workflow_xml_generator.requirement_ingestion.requirement_models import (
    DEFAULT_REQUIREMENT_COLUMN,
)


@dataclass(frozen=True)
class GenerationSettings:
    """Locations and spreadsheet options for one generation run."""

    requirements_path: Path
    template_directory: Path
    output_directory: Path
    manifest_path: Path
    requirement_column: str = DEFAULT_REQUIREMENT_COLUMN
    sheet_name: str | None = None
