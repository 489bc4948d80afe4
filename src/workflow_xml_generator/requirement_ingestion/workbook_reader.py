"""Requirements workbook reader."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Sequence
from pathlib import Path

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from .requirement_models import DEFAULT_REQUIREMENT_COLUMN, RequirementRow

logger = logging.getLogger(__name__)

HEADER_ROW = 1

# XML parse errors from the stdlib parser and lxml both derive from SyntaxError.
_WORKBOOK_READ_ERRORS = (zipfile.BadZipFile, OSError, KeyError, ValueError, SyntaxError)


class RequirementsWorkbookError(Exception):
    """Raised when the requirements workbook cannot be read."""


def read_requirements(
    workbook_path: Path | str,
    *,
    column_name: str = DEFAULT_REQUIREMENT_COLUMN,
    sheet_name: str | None = None,
) -> tuple[RequirementRow, ...]:
    """Read requirement rows from the first (or the named) sheet.

    The first row holds the headers. Fully empty rows are ignored. A missing
    requirement column is tolerated: every row then has no requirement name.
    """
    path = Path(workbook_path)
    if not path.exists():
        raise RequirementsWorkbookError(f"Requirements workbook not found: {path}")
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, *_WORKBOOK_READ_ERRORS) as exc:
        raise RequirementsWorkbookError(
            f"Failed to open requirements workbook {path}: {exc}"
        ) from exc

    try:
        if sheet_name is not None and sheet_name not in workbook.sheetnames:
            raise RequirementsWorkbookError(
                f"Sheet '{sheet_name}' not found in requirements workbook {path}"
            )
        sheet = workbook[sheet_name] if sheet_name is not None else workbook.worksheets[0]
        rows = list(sheet.iter_rows(values_only=True))
    except _WORKBOOK_READ_ERRORS as exc:
        raise RequirementsWorkbookError(
            f"Failed to read sheet from requirements workbook {path}: {exc}"
        ) from exc
    finally:
        workbook.close()

    if not rows:
        return ()
    column_index = _find_column(rows[0], column_name)
    if column_index is None:
        logger.warning(
            "Column '%s' not found in %s; no requirement names available", column_name, path
        )

    requirements: list[RequirementRow] = []
    for offset, values in enumerate(rows[1:], start=HEADER_ROW + 1):
        if all(_is_empty(value) for value in values):
            continue
        value = _cell_at(values, column_index)
        requirements.append(
            RequirementRow(row_number=offset, requirement_name=_optional_text(value))
        )
    return tuple(requirements)


def _find_column(header: Sequence[object], column_name: str) -> int | None:
    for index, value in enumerate(header):
        if value is not None and str(value).strip() == column_name:
            return index
    return None


def _optional_text(value: object) -> str | None:
    if _is_empty(value):
        return None
    return str(value).strip()


def _is_empty(value: object) -> bool:
    return value is None or str(value).strip() == ""


def _cell_at(values: Sequence[object], column_index: int | None) -> object:
    if column_index is None or column_index >= len(values):
        return None
    return values[column_index]
