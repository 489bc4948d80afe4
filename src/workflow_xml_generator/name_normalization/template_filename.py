"""Template file name derivation from free-text requirement names."""

from __future__ import annotations

import re

TEMPLATE_FILE_EXTENSION = ".xml"

_NON_WORD_REGEX = re.compile(r"[^a-zA-Z0-9\s]")
_WHITESPACE_REGEX = re.compile(r"\s+")
_CASE_BOUNDARY_REGEX = re.compile(r"([a-z])([A-Z])")
_DIGIT_RUN_REGEX = re.compile(r"(\d+)")
_UNDERSCORE_RUN_REGEX = re.compile(r"_+")


def convert_requirement_name_to_file(requirement_name: str) -> str:
    """Return the canonical template file name for ``requirement_name``.

    Works on the raw requirement name, never on the flow identifier. The
    case-boundary underscore is inserted before lowercasing, otherwise the
    boundary is lost.

    Example: ``"Update UserInfo2"`` becomes ``"update_user_info_(2).xml"``.
    """
    name = _NON_WORD_REGEX.sub("", requirement_name)
    name = _WHITESPACE_REGEX.sub("_", name)
    name = _CASE_BOUNDARY_REGEX.sub(r"\1_\2", name)
    name = _DIGIT_RUN_REGEX.sub(r"_(\1)", name)
    name = name.lower()
    name = _UNDERSCORE_RUN_REGEX.sub("_", name)
    return name + TEMPLATE_FILE_EXTENSION
