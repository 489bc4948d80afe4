"""Workflow generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from workflow_xml_generator.configuration.runtime_settings import GenerationSettings
from workflow_xml_generator.name_normalization import (
    convert_requirement_name_to_file,
    generate_name_of_flow,
)
from workflow_xml_generator.requirement_ingestion import (
    RequirementRow,
    RequirementsWorkbookError,
    read_requirements,
)
from workflow_xml_generator.template_resolution import (
    TemplateDirectoryUnreadableError,
    TemplateNameMissingError,
    TemplateNotFoundError,
    TemplateUnreadableError,
    read_template_name,
    resolve_template_path,
)
from workflow_xml_generator.workflow_emission import write_manifest, write_workflow_document

from .run_contracts import RowOutcome, RowStatus, RunOutcome, SkipReason

logger = logging.getLogger(__name__)

RequirementsReader = Callable[..., Sequence[RequirementRow]]


class RunExecutionError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_workflow_generation_run(
    settings: GenerationSettings,
    *,
    requirements_reader: RequirementsReader | None = None,
) -> RunOutcome:
    """Generate one workflow document per resolvable requirement row.

    Rows are processed sequentially. Per-row failures are skipped and reported;
    an unreadable workbook, template directory or output location aborts the run
    before the manifest is written.
    """
    reader = requirements_reader or read_requirements
    if not settings.template_directory.is_dir():
        raise RunExecutionError(
            f"Template directory cannot be read: {settings.template_directory}"
        )
    try:
        settings.output_directory.mkdir(parents=True, exist_ok=True)
        rows = reader(
            settings.requirements_path,
            column_name=settings.requirement_column,
            sheet_name=settings.sheet_name,
        )
    except (RequirementsWorkbookError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc

    logger.info("Processing %d requirement rows from %s", len(rows), settings.requirements_path)
    outcomes: list[RowOutcome] = []
    generated_files: list[str] = []
    try:
        for row in rows:
            outcome = process_requirement_row(row, settings)
            outcomes.append(outcome)
            if outcome.status == RowStatus.GENERATED and outcome.output_file_name:
                generated_files.append(outcome.output_file_name)
        manifest_path = write_manifest(settings.manifest_path, generated_files)
    except (TemplateDirectoryUnreadableError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc

    run_outcome = RunOutcome(
        manifest_path=manifest_path,
        generated_files=tuple(generated_files),
        row_outcomes=tuple(outcomes),
    )
    logger.info(
        "Processing completed: generated=%d skipped=%d manifest=%s",
        run_outcome.generated_count,
        run_outcome.skipped_count,
        manifest_path,
    )
    return run_outcome


def process_requirement_row(row: RequirementRow, settings: GenerationSettings) -> RowOutcome:
    """Run one row through name derivation, template lookup and emission.

    Raises:
      TemplateDirectoryUnreadableError: If the template directory cannot be listed.
      OSError: If the workflow document cannot be written.
    """
    name = row.requirement_name
    if not name:
        logger.debug("Row %d: no requirement name, skipped", row.row_number)
        return RowOutcome.skipped(row.row_number, name, SkipReason.NO_NAME)

    flow_identifier = generate_name_of_flow(name)
    if not flow_identifier:
        return _skip(
            row,
            SkipReason.EMPTY_FLOW_IDENTIFIER,
            f"Requirement name '{name}' yields an empty flow identifier",
        )

    file_name = convert_requirement_name_to_file(name)
    try:
        template_path = resolve_template_path(settings.template_directory, file_name)
    except TemplateNotFoundError as exc:
        return _skip(row, SkipReason.TEMPLATE_NOT_FOUND, str(exc), flow_identifier)

    try:
        template_name = read_template_name(template_path)
    except TemplateUnreadableError as exc:
        return _skip(row, SkipReason.TEMPLATE_UNREADABLE, str(exc), flow_identifier)
    except TemplateNameMissingError as exc:
        return _skip(row, SkipReason.TEMPLATE_NAME_MISSING, str(exc), flow_identifier)

    output_path = write_workflow_document(
        settings.output_directory, flow_identifier, template_name
    )
    logger.info("Row %d: generated %s from %s", row.row_number, output_path.name, template_path)
    return RowOutcome.generated(
        row.row_number,
        name,
        flow_identifier=flow_identifier,
        template_path=template_path,
        template_name=template_name,
        output_file_name=output_path.name,
    )


def _skip(
    row: RequirementRow,
    reason: SkipReason,
    detail: str,
    flow_identifier: str | None = None,
) -> RowOutcome:
    logger.warning("Row %d skipped (%s): %s", row.row_number, reason.value, detail)
    return RowOutcome.skipped(
        row.row_number,
        row.requirement_name,
        reason,
        detail,
        flow_identifier=flow_identifier,
    )
