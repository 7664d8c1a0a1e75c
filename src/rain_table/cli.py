"""Command-line interface for rain-table."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import click
import yaml

from .exceptions import RainTableError
from .generator import generate
from .models import ColumnSpec, TableOptions


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _parse_select(value: str) -> ColumnSpec:
    """Parse ``KEY[:LABEL[:SIZE[:ALIGN]]]`` into a column spec."""
    parts = value.split(":")
    if len(parts) > 4 or not parts[0]:
        raise click.BadParameter(
            f"'{value}' is not KEY[:LABEL[:SIZE[:ALIGN]]]", param_hint="--select"
        )
    key = parts[0]
    label = parts[1] if len(parts) > 1 and parts[1] else None
    size: int | None = None
    if len(parts) > 2 and parts[2]:
        try:
            size = int(parts[2])
        except ValueError:
            raise click.BadParameter(
                f"size '{parts[2]}' is not an integer", param_hint="--select"
            ) from None
    align = parts[3] if len(parts) > 3 and parts[3] else None
    try:
        return ColumnSpec(key=key, label=label, size=size, align=align)
    except RainTableError as e:
        raise click.BadParameter(str(e), param_hint="--select") from e


def _parse_padding(value: str | None) -> str | int | None:
    if value is None:
        return None
    if value.isdigit():
        return int(value)
    return value


def _load_rows(stream: TextIO, fmt: str) -> Any:
    """Load records from JSON or YAML text."""
    text = stream.read()
    if fmt == "yaml":
        return yaml.safe_load(text)
    return json.loads(text)


def _load_options(path: str | None) -> TableOptions:
    if path is None:
        return TableOptions()
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        click.echo(f"✗ Failed to parse config file: {e}", err=True)
        sys.exit(1)
    if not isinstance(data, dict):
        click.echo("✗ Config file must contain a mapping", err=True)
        sys.exit(1)
    return TableOptions.from_mapping(data)


@click.group()
@click.version_option(package_name="rain-table")
def cli() -> None:
    """rain-table: render records as box-drawing text tables."""
    pass


@cli.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"]),
    help="Input format (default: from file extension, else json)",
)
@click.option(
    "--select",
    "-s",
    "select",
    multiple=True,
    help="Column to show as KEY[:LABEL[:SIZE[:ALIGN]]] (repeatable, in order)",
)
@click.option("--sort-by", help="Column key to sort rows by")
@click.option(
    "--reverse/--no-reverse",
    default=None,
    help="Reverse rows after sorting (only with --sort-by)",
)
@click.option(
    "--header/--no-header",
    default=None,
    help="Show or hide the header line (default: shown, hidden for a single record)",
)
@click.option("--padding", help="Cell padding: a number of spaces or literal text")
@click.option("--vertical", help="Column border character (default: |)")
@click.option("--intersection", help="Separator crossing character (default: +)")
@click.option("--horizon", help="Separator fill character (default: -)")
@click.option(
    "--normalize/--no-normalize",
    default=None,
    help="Replace characters the encoding cannot represent (default: enabled)",
)
@click.option("--encoding", help="Encoding used by --normalize (default: utf-8)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with default table options",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def render(
    file: TextIO,
    fmt: str | None,
    select: tuple[str, ...],
    sort_by: str | None,
    reverse: bool | None,
    header: bool | None,
    padding: str | None,
    vertical: str | None,
    intersection: str | None,
    horizon: str | None,
    normalize: bool | None,
    encoding: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Render JSON or YAML records from FILE (default: stdin) as a table.

    FILE must contain a list of records or a single record; a single
    record is rendered vertically.
    """
    _configure_logging(verbose)

    if fmt is None:
        suffix = Path(getattr(file, "name", "")).suffix.lower()
        fmt = "yaml" if suffix in (".yaml", ".yml") else "json"

    columns = [_parse_select(value) for value in select]

    overrides: dict[str, Any] = {
        "select": columns or None,
        "sort_by": sort_by,
        "reverse": reverse,
        "header": header,
        "padding": _parse_padding(padding),
        "vertical": vertical,
        "intersection": intersection,
        "horizon": horizon,
        "normalize": normalize,
        "in_code": encoding,
    }
    overrides = {name: value for name, value in overrides.items() if value is not None}

    try:
        rows = _load_rows(file, fmt)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        click.echo(f"✗ Failed to parse {fmt} input: {e}", err=True)
        sys.exit(1)

    try:
        options = _load_options(config_path)
        output = generate(rows, options, **overrides)
    except RainTableError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(output, nl=False)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
