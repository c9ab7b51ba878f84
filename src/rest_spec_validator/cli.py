"""CLI entry point for rest-spec-validator."""

import json
import logging
from pathlib import Path

import click

from rest_spec_validator.jsonspec.loader import load_json_spec
from rest_spec_validator.model.loader import load_model
from rest_spec_validator.validator.diagnostics import Diagnostic, DiagnosticReport
from rest_spec_validator.validator.errors import ReconcileError
from rest_spec_validator.validator.reconciler import reconcile
from rest_spec_validator.validator.resolver import PropertyResolver

LOG_LEVELS = ["debug", "info", "warning", "error"]


def _highlight(diagnostic: Diagnostic, color: bool) -> str:
    """Render a diagnostic line, with the request and parameter names in green."""
    line = diagnostic.message
    if not color:
        return line
    line = line.replace(diagnostic.request, click.style(diagnostic.request, fg="green"), 1)
    if diagnostic.name is not None:
        line = line.replace(
            f"parameter {diagnostic.name} ",
            f"parameter {click.style(diagnostic.name, fg='green')} ",
            1,
        )
    return line


def _load_model(model_path: Path):
    try:
        return load_model(model_path)
    except ValueError as e:
        raise click.ClickException(f"Invalid model file {model_path}: {e}") from e


@click.group()
@click.option(
    "--log-level",
    default="error",
    envvar="REST_SPEC_VALIDATOR_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level for diagnostics written to stderr.",
)
def main(log_level: str):
    """REST Spec Validator — check a type model against the rest-api-spec."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("model_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("spec_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--request", "only", default=None, help="Only compare the request with this name.")
@click.option("--format", "fmt", default="text", type=click.Choice(["text", "json"]), help="Report format.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the report to this file.")
@click.option("--no-color", is_flag=True, help="Do not highlight names in the text report.")
def check(model_path: Path, spec_dir: Path, only: str | None, fmt: str, output: Path | None, no_color: bool):
    """Compare the request definitions of MODEL_PATH with the json specs in SPEC_DIR."""
    model = _load_model(model_path)
    try:
        json_spec = load_json_spec(spec_dir)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    report = DiagnosticReport()
    try:
        reconcile(model, json_spec, diagnostics=report, only=only)
    except ReconcileError as e:
        raise click.ClickException(str(e)) from e

    if fmt == "json":
        text = json.dumps(report.to_dict(), indent=2)
    else:
        lines = [_highlight(d, color=not no_color and output is None) for d in report]
        lines.append(f"{len(report)} mismatches found in {len(model.endpoints)} endpoints.")
        text = "\n".join(lines)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        click.echo(f"Report saved to {output}")
    else:
        click.echo(text)


@main.command()
@click.argument("model_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
def resolve(model_path: Path, name: str):
    """Show the flattened properties of request or interface NAME."""
    model = _load_model(model_path)
    try:
        props = PropertyResolver(model).resolve(name)
    except ReconcileError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"path: {', '.join(props.path) or '-'}")
    click.echo(f"query: {', '.join(props.query) or '-'}")
    click.echo(f"body: {'yes' if props.body else 'no'}")
