from __future__ import annotations

from pathlib import Path
import sys

import typer

app = typer.Typer(name="shouldcheck", help="Inspect test markers and assertion settings")
config_app = typer.Typer(name="config", help="Inspect the shouldcheck configuration")
schema_app = typer.Typer(name="schema", help="Generate schema tooling for the config file")
app.add_typer(config_app, name="config")
app.add_typer(schema_app, name="schema")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Inspect test markers and assertion settings."""
    from shouldcheck.verbose import setup_logger

    setup_logger(verbose=verbose)


def _extend_path(paths: list[str] | None) -> None:
    for entry in reversed(paths or []):
        resolved = str(Path(entry).resolve())
        if resolved not in sys.path:
            sys.path.insert(0, resolved)


@app.command()
def query(
    module: str = typer.Argument(help="Dotted name of the module to inspect"),
    member: str = typer.Argument(help="Test routine, e.g. test_x or TestCase.test_x"),
    marker: str = typer.Option(..., "--marker", "-m", help="Marker kind to look for"),
    path: list[str] | None = typer.Option(
        None, "--path", "-p", help="Extra import path (repeatable)"
    ),
):
    """Print whether exactly one marker of a kind is attached to a routine."""
    from shouldcheck.failure import ConfigurationError
    from shouldcheck.markers import get_marker_kind
    from shouldcheck.query import get_marker

    _extend_path(path)
    try:
        kind = get_marker_kind(marker)
        found = get_marker(module, member, kind)
    except (ConfigurationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("true" if found is not None else "false")
    if found is not None and not isinstance(found, type):
        typer.echo(repr(found))


@app.command()
def markers(
    module: str = typer.Argument(help="Dotted name of the module to inspect"),
    member: str = typer.Argument(help="Test routine, e.g. test_x or TestCase.test_x"),
    path: list[str] | None = typer.Option(
        None, "--path", "-p", help="Extra import path (repeatable)"
    ),
):
    """List every marker attached to a routine."""
    from shouldcheck.failure import ConfigurationError
    from shouldcheck.markers import get_markers, kind_of
    from shouldcheck.query import resolve_member

    _extend_path(path)
    try:
        target = resolve_member(module, member)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    attached = get_markers(target)
    if not attached:
        typer.echo(f"{module}.{member}: no markers")
        return
    for marker in attached:
        if isinstance(marker, type):
            typer.echo(f"  {kind_of(marker).__name__}")
        else:
            typer.echo(f"  {kind_of(marker).__name__}: {marker!r}")


@app.command()
def init(
    dir: str = typer.Option(
        ".", "--dir", help="Directory to write shouldcheck.yaml into"
    ),
):
    """Write a default shouldcheck.yaml."""
    from shouldcheck.config import DEFAULT_CONFIG_NAME, default_config_yaml

    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    target = project_dir / DEFAULT_CONFIG_NAME
    if target.exists():
        typer.echo(f"{DEFAULT_CONFIG_NAME} already exists in {dir}, skipping.")
        return

    target.write_text(default_config_yaml())
    typer.echo(f"Wrote {target}")


@config_app.command("show")
def config_show(
    config: str | None = typer.Option(
        None, "--config", "-c", help="Config file (defaults to $SHOULDCHECK_CONFIG)"
    ),
):
    """Validate a config file and print the effective settings."""
    import yaml
    from pydantic import ValidationError

    from shouldcheck.config import get_config, load_config

    try:
        if config is not None:
            config_path = Path(config)
            if not config_path.exists():
                typer.echo(f"Error: config file not found: {config}", err=True)
                raise typer.Exit(1)
            effective = load_config(config_path)
        else:
            effective = get_config()
    except (ValidationError, ValueError) as e:
        typer.echo(f"Error: invalid config: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(yaml.dump(effective.model_dump(), default_flow_style=False, sort_keys=False))


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/shouldcheck.schema.json", help="Output path for the JSON Schema"
    ),
):
    """Generate the JSON Schema for shouldcheck.yaml."""
    from shouldcheck.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Schema written: {out_path}")


if __name__ == "__main__":
    app()
