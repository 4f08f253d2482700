"""CLI command: native-css inspect -- summarise a compiled stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from native_css.cli.compile import read_options
from native_css.compiler import CompileError, compile_css


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True))
@click.option("--grouping", multiple=True, help="Regex for group container class names.")
@click.option("--ignore-warning", multiple=True, help="Regex for properties whose warnings are suppressed.")
def inspect(stylesheet: str, grouping: tuple[str, ...], ignore_warning: tuple[str, ...]) -> None:
    """Compile a CSS file and display its rule sets, keyframes and variables.

    Exits with code 1 on a compile error.
    """
    css_path = Path(stylesheet)

    try:
        source = css_path.read_text(encoding="utf-8")
        compiled = compile_css(source, read_options(grouping, ignore_warning))
    except CompileError as exc:
        click.echo(f"Compile error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rule sets: {len(compiled.rules)}")
    click.echo(f"Keyframes: {len(compiled.keyframes)}")
    if compiled.rem is not None:
        click.echo(f"rem:       {compiled.rem}")
    click.echo()

    click.echo("Rules:")
    warnings = 0
    for key, rule_set in compiled.rules:
        parts = [f"  .{key}"]
        parts.append(f"normal={len(rule_set.normal or [])}")
        parts.append(f"important={len(rule_set.important or [])}")
        flags = [
            name
            for name in ("variables", "container", "animation", "hover", "active", "focus")
            if getattr(rule_set, name)
        ]
        if flags:
            parts.append(f"flags={','.join(flags)}")
        click.echo("  ".join(parts))
        for warning in rule_set.warnings or ():
            warnings += 1
            click.echo(f"    warning: {warning}")
    click.echo()

    if compiled.keyframes:
        click.echo("Keyframes:")
        for name, animation in compiled.keyframes:
            click.echo(f"  {name}  properties={','.join(animation.frames)}")
        click.echo()

    for label, record in (
        ("Root variables", compiled.root_variables),
        ("Universal variables", compiled.universal_variables),
    ):
        if record:
            click.echo(f"{label}:")
            for name, subtypes in record.items():
                values = "  ".join(f"{subtype}={value!r}" for subtype, value in subtypes.items())
                click.echo(f"  {name}  {values}")
            click.echo()

    if compiled.flags:
        click.echo("Flags:")
        for name, value in compiled.flags.items():
            click.echo(f"  {name}={value}")
        click.echo()

    click.echo(f"Summary: {len(compiled.rules)} rule set(s), {warnings} warning(s)")
