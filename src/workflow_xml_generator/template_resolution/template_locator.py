"""Template file lookup by derived file name."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class TemplateNotFoundError(Exception):
    """Raised when no directory entry matches the derived template file name."""

    def __init__(self, file_name: str, directory: Path) -> None:
        super().__init__(f"File matching '{file_name}' not found in {directory}")
        self.file_name = file_name
        self.directory = directory


class TemplateDirectoryUnreadableError(Exception):
    """Raised when the template directory cannot be listed."""


def match_template_entry(entries: Iterable[str], file_name: str) -> str | None:
    """Return the first entry equal to ``file_name`` ignoring case, if any."""
    target = file_name.lower()
    for entry in entries:
        if entry.lower() == target:
            return entry
    return None


def resolve_template_path(template_directory: Path | str, file_name: str) -> Path:
    """Resolve ``file_name`` against the entries of ``template_directory``.

    The listing is one level deep and sorted so duplicates differing only in
    case resolve the same way on every platform.
    """
    directory = Path(template_directory)
    logger.debug("Looking for template file: %s", file_name)
    try:
        entries = sorted(os.listdir(directory))
    except OSError as exc:
        raise TemplateDirectoryUnreadableError(
            f"Template directory cannot be read: {directory} ({exc.strerror or exc})"
        ) from exc

    entry = match_template_entry(entries, file_name)
    if entry is None:
        raise TemplateNotFoundError(file_name, directory)
    return directory / entry
