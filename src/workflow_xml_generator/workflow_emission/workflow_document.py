"""Workflow document rendering and writing."""

from __future__ import annotations

from pathlib import Path

from .constants import WORKFLOW_FILE_EXTENSION, WORKFLOW_FILE_PREFIX, WORKFLOW_NAME_PREFIX

_WORKFLOW_TEMPLATE = """<workflow name="{workflow_name}" start="main">
    <sequence id="main">
        <activity id="Workflow.{flow_identifier}" type="Comp.Logic.Workflow.Tasks.RunTemplate">
            {{
                TemplateName: "{template_name}",
                DueDate: "0d",
                DueAfter: "@@End",
                AssignTo: "@@Self"
            }}
        </activity>
    </sequence>
</workflow>"""


def render_workflow_document(flow_identifier: str, template_name: str) -> str:
    """Render the single-activity workflow document.

    Values are substituted verbatim. Characters that need XML escaping are
    not escaped and produce a malformed document.
    """
    return _WORKFLOW_TEMPLATE.format(
        workflow_name=f"{WORKFLOW_NAME_PREFIX}{flow_identifier}",
        flow_identifier=flow_identifier,
        template_name=template_name,
    )


def workflow_file_name(flow_identifier: str) -> str:
    """Return the output file name for ``flow_identifier``."""
    return f"{WORKFLOW_FILE_PREFIX}{flow_identifier}{WORKFLOW_FILE_EXTENSION}"


def write_workflow_document(
    output_directory: Path | str, flow_identifier: str, template_name: str
) -> Path:
    """Write the rendered workflow document into ``output_directory``.

    Returns:
      Path of the written file. An existing file with the same name is replaced.

    Raises:
      OSError: If the file cannot be written.
    """
    destination = Path(output_directory) / workflow_file_name(flow_identifier)
    destination.write_text(
        render_workflow_document(flow_identifier, template_name), encoding="utf-8"
    )
    return destination
