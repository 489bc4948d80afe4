"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RowStatus(str, Enum):
    """Terminal state of one requirement row."""

    GENERATED = "generated"
    SKIPPED = "skipped"


class SkipReason(str, Enum):
    """Why a requirement row produced no workflow document."""

    NO_NAME = "no-name"
    EMPTY_FLOW_IDENTIFIER = "empty-flow-identifier"
    TEMPLATE_NOT_FOUND = "template-not-found"
    TEMPLATE_UNREADABLE = "template-unreadable"
    TEMPLATE_NAME_MISSING = "template-name-missing"


@dataclass(frozen=True)
class RowOutcome:  # pylint: disable=too-many-instance-attributes
    """Outcome of processing one requirement row."""

    row_number: int
    requirement_name: str | None
    status: RowStatus
    flow_identifier: str | None = None
    template_path: Path | None = None
    template_name: str | None = None
    output_file_name: str | None = None
    skip_reason: SkipReason | None = None
    detail: str | None = None

    @staticmethod
    def generated(
        row_number: int,
        requirement_name: str,
        *,
        flow_identifier: str,
        template_path: Path,
        template_name: str,
        output_file_name: str,
    ) -> RowOutcome:
        return RowOutcome(
            row_number=row_number,
            requirement_name=requirement_name,
            status=RowStatus.GENERATED,
            flow_identifier=flow_identifier,
            template_path=template_path,
            template_name=template_name,
            output_file_name=output_file_name,
        )

    @staticmethod
    def skipped(
        row_number: int,
        requirement_name: str | None,
        reason: SkipReason,
        detail: str | None = None,
        *,
        flow_identifier: str | None = None,
    ) -> RowOutcome:
        return RowOutcome(
            row_number=row_number,
            requirement_name=requirement_name,
            status=RowStatus.SKIPPED,
            flow_identifier=flow_identifier,
            skip_reason=reason,
            detail=detail,
        )


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    manifest_path: Path
    generated_files: tuple[str, ...]
    row_outcomes: tuple[RowOutcome, ...]

    @property
    def generated_count(self) -> int:
        return len(self.generated_files)

    @property
    def skipped_count(self) -> int:
        return sum(1 for outcome in self.row_outcomes if outcome.status == RowStatus.SKIPPED)
