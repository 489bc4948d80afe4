"""Template resolution exports."""

from .template_attributes import (
    TEMPLATE_ROOT_TAG,
    TemplateNameMissingError,
    TemplateUnreadableError,
    extract_template_name,
    read_template_name,
)
from .template_locator import (
    TemplateDirectoryUnreadableError,
    TemplateNotFoundError,
    match_template_entry,
    resolve_template_path,
)

__all__ = [
    "TEMPLATE_ROOT_TAG",
    "TemplateDirectoryUnreadableError",
    "TemplateNameMissingError",
    "TemplateNotFoundError",
    "TemplateUnreadableError",
    "extract_template_name",
    "match_template_entry",
    "read_template_name",
    "resolve_template_path",
]
