"""End-to-end generation run tests against real workbooks and templates."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from workflow_xml_generator.configuration import build_settings
from workflow_xml_generator.run_execution import execute_workflow_generation_run


def _write_requirements(path: Path, names: list[str | None]) -> Path:
    workbook = Workbook()
    sheet = workbook.active
    assert sheet is not None
    sheet.append(["Requirements Name", "Priority"])
    for name in names:
        sheet.append([name, "high"])
    workbook.save(path)
    return path


def test_single_row_produces_document_and_manifest(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "change_name_and_address.xml").write_text(
        '<template name="Foo"/>', encoding="utf-8"
    )
    settings = build_settings(
        requirements_path=_write_requirements(
            tmp_path / "worksheet.xlsx", ["Change Name and Address"]
        ),
        template_directory=templates,
        output_directory=tmp_path / "output",
    )

    outcome = execute_workflow_generation_run(settings)

    output_files = sorted(path.name for path in settings.output_directory.glob("*.xml"))
    assert output_files == ["ChangeToNeed.Keys.ChangeNameAddress.xml"]
    document = (settings.output_directory / output_files[0]).read_text(encoding="utf-8")
    assert 'TemplateName: "Foo",' in document
    assert settings.manifest_path.read_text(encoding="utf-8") == output_files[0]
    assert outcome.generated_files == tuple(output_files)


def test_row_without_template_does_not_affect_following_rows(tmp_path: Path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "Update_User_Info_(2).XML").write_text(
        '<?xml version="1.0"?>\n<template name="UserInfoV2"><steps/></template>',
        encoding="utf-8",
    )
    settings = build_settings(
        requirements_path=_write_requirements(
            tmp_path / "worksheet.xlsx", ["Missing Template", None, "Update UserInfo2"]
        ),
        template_directory=templates,
        output_directory=tmp_path / "output",
        manifest_path=tmp_path / "generated_files.csv",
    )

    outcome = execute_workflow_generation_run(settings)

    assert outcome.generated_files == ("ChangeToNeed.Keys.UpdateUserinfo2.xml",)
    assert outcome.skipped_count == 2
    assert not (settings.output_directory / "ChangeToNeed.Keys.MissingTemplate.xml").exists()
    assert (tmp_path / "generated_files.csv").read_text(encoding="utf-8") == (
        "ChangeToNeed.Keys.UpdateUserinfo2.xml"
    )
