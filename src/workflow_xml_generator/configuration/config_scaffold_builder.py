"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "workflow-generator.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration for workflow-xml-generator.
# Relative paths are resolved against the directory of this file.
# Remove <OPTIONAL> entries you do not need.

requirements:
  # Workbook listing one requirement per row.
  path: "./worksheet.xlsx"
  # Sheet to read; the first sheet is used when omitted.
  # sheet: "<OPTIONAL>"
  # Header of the column holding the requirement names.
  column: "Requirements Name"

templates:
  # Flat directory of <template name="..."> XML files.
  directory: "./templates"

output:
  # Generated workflow documents are written here.
  directory: "./output"
  # List of generated file names, one per line.
  manifest: "./output/generated_files.csv"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with the default locations."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
