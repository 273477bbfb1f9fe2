"""Command line interface entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from es_diff_suppress.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from es_diff_suppress.equivalence import DocumentShapeError, normalize_configured_document
from es_diff_suppress.json_documents import DocumentParseError, dump_document
from es_diff_suppress.logging_setup import LOG_LEVELS, configure_logging
from es_diff_suppress.resource_catalog import (
    AttributeSuppressor,
    UnknownAttributeError,
    find_attribute_suppressor,
    list_attribute_suppressors,
)
from es_diff_suppress.run_execution import RunExecutionError, RunRequest, execute_drift_check_run


class CliError(Exception):
    """Custom CLI error."""


_RESOURCE_OPTION = click.option(
    "--resource",
    "resource_type",
    required=True,
    help="Provider resource type, e.g. elasticsearch_index_template",
)
_ATTRIBUTE_OPTION = click.option(
    "--attribute",
    required=True,
    help="JSON attribute of the resource, e.g. template",
)
_DOCUMENT_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="es-diff-suppress")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostics written to stderr.",
)
def cli(log_level: str) -> None:
    """Semantic JSON diff suppression for Elasticsearch resources."""
    configure_logging(log_level)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML drift-check manifest template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder drift-check manifest with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-attributes")
def list_attributes() -> None:
    """List every resource attribute with a registered diff suppression."""
    for entry in list_attribute_suppressors():
        suffix = " (identifier required)" if entry.requires_identifier else ""
        click.echo(f"{entry.resource_type}.{entry.attribute}\t{entry.kind.value}{suffix}")


@cli.command(name="compare")
@_RESOURCE_OPTION
@_ATTRIBUTE_OPTION
@click.option("--identifier", required=False, help="Resource identifier (templates only)")
@click.option("--old", "old_path", required=True, type=_DOCUMENT_PATH, help="Stored document")
@click.option("--new", "new_path", required=True, type=_DOCUMENT_PATH, help="Configured document")
@click.option(
    "--fail-on-diff",
    is_flag=True,
    default=False,
    help="Exit with status 1 when the documents differ.",
)
def compare(
    resource_type: str,
    attribute: str,
    identifier: str | None,
    old_path: Path,
    new_path: Path,
    fail_on_diff: bool,
) -> None:
    """Compare a stored and a configured document for one resource attribute."""
    suppressor = _find_suppressor(resource_type, attribute)
    if suppressor.requires_identifier and not identifier:
        raise CliError(f"--identifier is required for {resource_type}.{attribute}.")
    try:
        old_text = old_path.read_text(encoding="utf-8")
        new_text = new_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CliError(str(exc)) from exc
    equivalent = suppressor.evaluate(old_text, new_text, identifier)
    click.echo("equivalent" if equivalent else "different")
    if fail_on_diff and not equivalent:
        raise CliError(f"{resource_type}.{attribute} documents differ.")


@cli.command(name="normalize")
@_RESOURCE_OPTION
@_ATTRIBUTE_OPTION
@click.option("--new", "new_path", required=True, type=_DOCUMENT_PATH, help="Configured document")
def normalize(resource_type: str, attribute: str, new_path: Path) -> None:
    """Print a configured document the way it is compared against the stored one."""
    suppressor = _find_suppressor(resource_type, attribute)
    profile = suppressor.kind.profile
    if profile is None:
        raise CliError(f"{resource_type}.{attribute} has no document normalization.")
    try:
        document = normalize_configured_document(new_path.read_text(encoding="utf-8"), profile)
        rendered = dump_document(document)
    except (DocumentParseError, DocumentShapeError, OSError, UnicodeDecodeError) as exc:
        raise CliError(str(exc)) from exc
    except (ValueError, RecursionError) as exc:
        raise CliError(f"Cannot render normalized document: {exc!r}") from exc
    click.echo(rendered)


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON drift-check manifest",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory for storing the results workbook",
)
@click.option(
    "--fail-on-diff",
    is_flag=True,
    default=False,
    help="Exit with status 1 when any check reports a difference.",
)
def run_checks(config_path: str, output_dir: str | None, fail_on_diff: bool) -> None:
    """Evaluate every check of a drift-check manifest."""
    try:
        outcome = execute_drift_check_run(
            RunRequest(config_path=config_path, output_dir=output_dir)
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))
    if fail_on_diff and outcome.has_differences:
        raise CliError(f"{outcome.different} check(s) reported differences.")


def _find_suppressor(resource_type: str, attribute: str) -> AttributeSuppressor:
    try:
        return find_attribute_suppressor(resource_type, attribute)
    except UnknownAttributeError as exc:
        raise CliError(str(exc)) from exc


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
