"""CLI command: textstyles check -- parse and build a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from textstyles.errors import CoercionError, ParseError
from textstyles.style import build_style_table
from textstyles.stylesheet import parse_stylesheet


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Exit with code 1 when there are warnings")
def check(stylesheet: str, strict: bool) -> None:
    """Parse a stylesheet and coerce every declaration.

    Prints diagnostics (warnings, info) and exits with code 1 if the
    stylesheet cannot be used, or with --strict if it has warnings.
    """
    css_path = Path(stylesheet)

    try:
        parsed = parse_stylesheet(css_path.read_text(encoding="utf-8"))
        table = build_style_table(parsed)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except CoercionError as exc:
        click.echo(f"Invalid value: {exc}", err=True)
        sys.exit(1)

    for diag in parsed.diagnostics:
        click.echo(str(diag))

    warnings = [d for d in parsed.diagnostics if d.is_warning]
    infos = len(parsed.diagnostics) - len(warnings)
    click.echo(
        f"OK: {css_path.name} defines {len(table)} selector(s), "
        f"{len(warnings)} warning(s), {infos} info"
    )

    if strict and warnings:
        sys.exit(1)
