"""Template attribute extraction."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

TEMPLATE_ROOT_TAG = "template"
TEMPLATE_NAME_ATTRIBUTE = "name"


class TemplateNameMissingError(Exception):
    """Raised when a template does not declare a usable name."""


class TemplateUnreadableError(Exception):
    """Raised when a resolved template file cannot be read."""


def extract_template_name(content: bytes | str) -> str:
    """Return the ``name`` attribute of the ``<template>`` root element.

    Args:
      content: Raw template document. Bytes keep the XML encoding declaration
        authoritative.

    Raises:
      TemplateNameMissingError: If the document is not well-formed, the root is
        not ``<template>``, or the attribute is absent or blank.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise TemplateNameMissingError(f"Template is not well-formed XML: {exc}") from exc

    if root.tag != TEMPLATE_ROOT_TAG:
        raise TemplateNameMissingError(
            f"Template root element is <{root.tag}>, expected <{TEMPLATE_ROOT_TAG}>."
        )
    name = root.get(TEMPLATE_NAME_ATTRIBUTE)
    if name is None or not name.strip():
        raise TemplateNameMissingError("Template root element has no name attribute.")
    return name


def read_template_name(template_path: Path | str) -> str:
    """Read ``template_path`` and extract its declared template name."""
    path = Path(template_path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise TemplateUnreadableError(f"Template file cannot be read: {path} ({exc})") from exc
    try:
        return extract_template_name(content)
    except TemplateNameMissingError as exc:
        raise TemplateNameMissingError(f"Template name not found in: {path} ({exc})") from exc
