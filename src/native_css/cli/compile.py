"""CLI command: native-css compile -- compile a stylesheet to JSON."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from native_css.compiler import CompileError, CompilerOptions, compile_css
from native_css.output import to_json


def read_options(grouping: tuple[str, ...], ignore_warning: tuple[str, ...]) -> CompilerOptions:
    return CompilerOptions(
        grouping=grouping,
        ignore_property_warning_patterns=ignore_warning,
    )


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True))
@click.option("-o", "--output", type=click.Path(), help="Write JSON here instead of stdout.")
@click.option("--grouping", multiple=True, help="Regex for group container class names.")
@click.option("--ignore-warning", multiple=True, help="Regex for properties whose warnings are suppressed.")
def compile(
    stylesheet: str,
    output: str | None,
    grouping: tuple[str, ...],
    ignore_warning: tuple[str, ...],
) -> None:
    """Compile a CSS file and print the compiled bundle as JSON."""
    css_path = Path(stylesheet)

    try:
        source = css_path.read_text(encoding="utf-8")
        compiled = compile_css(source, read_options(grouping, ignore_warning))
    except CompileError as exc:
        click.echo(f"Compile error: {exc}", err=True)
        sys.exit(1)

    text = to_json(compiled)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        click.echo(f"Wrote {len(compiled.rules)} rule set(s) to {output}")
    else:
        click.echo(text)
