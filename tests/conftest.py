"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from workflow_xml_generator.diagnostics import reset_logging


@pytest.fixture(autouse=True)
def _reset_package_logging():
    yield
    reset_logging()
