"""Requirement ingestion entities."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_REQUIREMENT_COLUMN = "Requirements Name"


@dataclass(frozen=True)
class RequirementRow:
    """One spreadsheet record describing a requirement."""

    row_number: int
    requirement_name: str | None
