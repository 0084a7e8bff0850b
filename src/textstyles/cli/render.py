"""CLI command: textstyles render -- convert marked-up text into styled runs."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from textstyles.config import TextStylesConfig
from textstyles.context import StyleContext
from textstyles.errors import TextStyleError
from textstyles.markup import TagOverride
from textstyles.style.properties import PROPERTIES


def _parse_overrides(css_overrides: tuple[str, ...], mappings: tuple[str, ...]) -> list[TagOverride]:
    overrides: list[TagOverride] = []
    for item in css_overrides:
        tag, sep, css = item.partition("=")
        if not sep or not tag.strip():
            raise click.BadParameter(f"expected TAG=CSS, got {item!r}", param_hint="--tag")
        overrides.append(TagOverride(tag.strip(), css=css))
    for item in mappings:
        tag, sep, name = item.partition("=")
        if not sep or not tag.strip() or not name.strip():
            raise click.BadParameter(f"expected TAG=SELECTOR, got {item!r}", param_hint="--map")
        overrides.append(TagOverride(tag.strip(), name=name.strip()))
    return overrides


def _style_dict(record: object) -> dict[str, str]:
    return {
        spec.css_name: spec.format(getattr(record, spec.attr))
        for spec in PROPERTIES
        if record.is_set(spec.attr)  # type: ignore[attr-defined]
    }


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.argument("text")
@click.option("--style", "default_selector", default="body", show_default=True, help="Default selector")
@click.option("--tag", "css_overrides", multiple=True, metavar="TAG=CSS", help="Inline CSS for a tag")
@click.option("--map", "mappings", multiple=True, metavar="TAG=SELECTOR", help="Style a tag with an existing selector")
@click.option("--merge/--no-merge", default=True, help="Layer tag overrides over existing styles")
@click.option("--json", "as_json", is_flag=True, help="Emit the result as JSON")
def render(
    stylesheet: str,
    text: str,
    default_selector: str,
    css_overrides: tuple[str, ...],
    mappings: tuple[str, ...],
    merge: bool,
    as_json: bool,
) -> None:
    """Convert TEXT (use '-' for stdin) and print the plain text and its runs."""
    if text == "-":
        text = sys.stdin.read()

    overrides = _parse_overrides(css_overrides, mappings)
    context = StyleContext(TextStylesConfig(default_selector=default_selector, merge_existing_styles=merge))

    try:
        context.set_stylesheet(Path(stylesheet).read_text(encoding="utf-8"))
        result = context.convert(text, overrides=overrides)
    except TextStyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        payload = {
            "text": result.text,
            "runs": [
                {
                    "start": run.start,
                    "length": run.length,
                    "selector": run.style.name,
                    "style": _style_dict(run.style),
                }
                for run in result.runs
            ],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(result.text)
    click.echo()
    for run in result.runs:
        click.echo(f"[{run.start}:{run.end}] {run.style.name} {run.text(result.text)!r}")
