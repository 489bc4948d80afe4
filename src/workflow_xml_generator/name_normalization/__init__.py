"""Name normalization exports."""

from .flow_identifier import FLOW_STOP_WORDS, FLOW_SYMBOLS, generate_name_of_flow
from .template_filename import TEMPLATE_FILE_EXTENSION, convert_requirement_name_to_file

__all__ = [
    "FLOW_STOP_WORDS",
    "FLOW_SYMBOLS",
    "TEMPLATE_FILE_EXTENSION",
    "generate_name_of_flow",
    "convert_requirement_name_to_file",
]
