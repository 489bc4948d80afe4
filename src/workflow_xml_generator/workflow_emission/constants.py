"""Shared workflow emission constants."""

from __future__ import annotations

# The downstream system expects these two spellings as they are.
WORKFLOW_NAME_PREFIX = "ChangeTONeed.Keys."
WORKFLOW_FILE_PREFIX = "ChangeToNeed.Keys."

WORKFLOW_FILE_EXTENSION = ".xml"
DEFAULT_MANIFEST_FILENAME = "generated_files.csv"
