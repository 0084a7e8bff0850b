"""CLI commands: textstyles inspect / format -- display a resolved stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from textstyles.errors import CoercionError, ParseError
from textstyles.style import StyleTable, parse_styles, to_css_string
from textstyles.style.properties import PROPERTIES


def _load(stylesheet: str) -> StyleTable:
    try:
        return parse_styles(Path(stylesheet).read_text(encoding="utf-8"))
    except (ParseError, CoercionError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def inspect(stylesheet: str) -> None:
    """Show every selector and the properties it sets."""
    table = _load(stylesheet)
    click.echo(f"Selectors: {len(table)}")
    for name, record in table.items():
        click.echo()
        click.echo(f"{name}:")
        if record.is_empty():
            click.echo("  (no properties)")
        for spec in PROPERTIES:
            if record.is_set(spec.attr):
                click.echo(f"  {spec.css_name}: {spec.format(getattr(record, spec.attr))}")


@click.command("format")
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
def format_stylesheet(stylesheet: str) -> None:
    """Print the stylesheet back as one normalized rule per selector."""
    table = _load(stylesheet)
    for name, record in table.items():
        click.echo(to_css_string(name, record))
