"""Workflow emission exports."""

from .constants import DEFAULT_MANIFEST_FILENAME, WORKFLOW_FILE_PREFIX, WORKFLOW_NAME_PREFIX
from .manifest_writer import write_manifest
from .workflow_document import render_workflow_document, workflow_file_name, write_workflow_document

__all__ = [
    "DEFAULT_MANIFEST_FILENAME",
    "WORKFLOW_FILE_PREFIX",
    "WORKFLOW_NAME_PREFIX",
    "render_workflow_document",
    "workflow_file_name",
    "write_manifest",
    "write_workflow_document",
]
