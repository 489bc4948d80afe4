"""Workflow document rendering tests."""

from __future__ import annotations

from pathlib import Path

from workflow_xml_generator.workflow_emission import (
    render_workflow_document,
    workflow_file_name,
    write_workflow_document,
)

EXPECTED_DOCUMENT = """<workflow name="ChangeTONeed.Keys.ChangeNameAddress" start="main">
    <sequence id="main">
        <activity id="Workflow.ChangeNameAddress" type="Comp.Logic.Workflow.Tasks.RunTemplate">
            {
                TemplateName: "Foo",
                DueDate: "0d",
                DueAfter: "@@End",
                AssignTo: "@@Self"
            }
        </activity>
    </sequence>
</workflow>"""


def test_renders_fixed_skeleton() -> None:
    assert render_workflow_document("ChangeNameAddress", "Foo") == EXPECTED_DOCUMENT


def test_substitutes_values_without_escaping() -> None:
    document = render_workflow_document("A&B", 'Say "hi" <now>')

    assert 'name="ChangeTONeed.Keys.A&B"' in document
    assert 'TemplateName: "Say "hi" <now>",' in document


def test_file_name_uses_lowercase_o_spelling() -> None:
    assert workflow_file_name("ChangeNameAddress") == "ChangeToNeed.Keys.ChangeNameAddress.xml"


def test_write_workflow_document_writes_utf8_file(tmp_path: Path) -> None:
    written = write_workflow_document(tmp_path, "ChangeNameAddress", "Foo")

    assert written == tmp_path / "ChangeToNeed.Keys.ChangeNameAddress.xml"
    assert written.read_text(encoding="utf-8") == EXPECTED_DOCUMENT


def test_write_workflow_document_replaces_existing_file(tmp_path: Path) -> None:
    write_workflow_document(tmp_path, "Flow", "First")

    written = write_workflow_document(tmp_path, "Flow", "Second")

    assert 'TemplateName: "Second"' in written.read_text(encoding="utf-8")
    assert 'TemplateName: "First"' not in written.read_text(encoding="utf-8")
