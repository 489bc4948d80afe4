"""Requirement ingestion exports."""

from .requirement_models import DEFAULT_REQUIREMENT_COLUMN, RequirementRow
from .workbook_reader import RequirementsWorkbookError, read_requirements

__all__ = [
    "DEFAULT_REQUIREMENT_COLUMN",
    "RequirementRow",
    "RequirementsWorkbookError",
    "read_requirements",
]
