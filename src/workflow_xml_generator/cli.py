"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import click

from workflow_xml_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    GenerationSettings,
    build_settings,
    load_configuration,
    write_placeholder_configuration,
)
from workflow_xml_generator.diagnostics import configure_logging
from workflow_xml_generator.run_execution import RunExecutionError, execute_workflow_generation_run
from workflow_xml_generator.workflow_emission import DEFAULT_MANIFEST_FILENAME


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="workflow-xml-generator")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug diagnostics.")
def cli(verbose: bool) -> None:
    """Generate workflow XML documents from a requirements workbook."""
    configure_logging(verbose)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with the default locations."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML configuration file",
)
@click.option(
    "--requirements",
    "requirements_path",
    type=click.Path(path_type=str),
    help="Requirements workbook (.xlsx)",
)
@click.option(
    "--templates",
    "template_directory",
    type=click.Path(path_type=str),
    help="Directory containing the XML templates",
)
@click.option(
    "--output-dir",
    "output_directory",
    type=click.Path(path_type=str),
    help="Directory for the generated workflow documents",
)
@click.option(
    "--manifest",
    "manifest_path",
    type=click.Path(path_type=str),
    help="Manifest file listing generated documents [default: <output-dir>/generated_files.csv]",
)
@click.option("--sheet", "sheet_name", help="Workbook sheet to read [default: first sheet]")
@click.option("--column", "requirement_column", help="Header of the requirement name column")
# pylint: disable=too-many-arguments
def generate(
    config_path: str | None,
    requirements_path: str | None,
    template_directory: str | None,
    output_directory: str | None,
    manifest_path: str | None,
    sheet_name: str | None,
    requirement_column: str | None,
) -> None:
    """Generate one workflow document per requirement row and write the manifest."""
    overrides = {
        "requirements_path": requirements_path,
        "template_directory": template_directory,
        "output_directory": output_directory,
        "manifest_path": manifest_path,
        "sheet_name": sheet_name,
        "requirement_column": requirement_column,
    }
    try:
        settings = _resolve_settings(config_path, overrides)
        outcome = execute_workflow_generation_run(settings)
    except (ConfigurationError, RunExecutionError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.manifest_path))


# pylint: enable=too-many-arguments


def _resolve_settings(
    config_path: str | None, overrides: dict[str, str | None]
) -> GenerationSettings:
    if config_path is None:
        missing = [
            option
            for option, key in (
                ("--requirements", "requirements_path"),
                ("--templates", "template_directory"),
                ("--output-dir", "output_directory"),
            )
            if not overrides[key]
        ]
        if missing:
            raise CliError(f"Missing option(s) {', '.join(missing)} (or provide --config).")
        return build_settings(**overrides)

    settings = load_configuration(config_path)
    changes: dict[str, object] = {
        key: Path(value) if key.endswith(("_path", "_directory")) else value
        for key, value in overrides.items()
        if value
    }
    # A manifest defaulted from the configured output directory follows an overridden one.
    output_override = overrides["output_directory"]
    default_manifest = settings.output_directory / DEFAULT_MANIFEST_FILENAME
    if (
        output_override
        and not overrides["manifest_path"]
        and settings.manifest_path == default_manifest
    ):
        changes["manifest_path"] = Path(output_override) / DEFAULT_MANIFEST_FILENAME
    return dataclasses.replace(settings, **changes)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
