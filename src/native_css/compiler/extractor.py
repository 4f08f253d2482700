"""Rule extractor: walks the stylesheet AST and dispatches by rule kind."""

from __future__ import annotations

import logging

from native_css.compiler.aggregate import route_rule
from native_css.compiler.declarations import compile_style_block
from native_css.compiler.keyframes import extract_keyframes
from native_css.compiler.options import DarkMode
from native_css.compiler.relocation import build_relocation_table
from native_css.compiler.state import CompilerState
from native_css.model import (
    ContainerQuery,
    ContainerRule,
    CustomAtRule,
    KeyframesRule,
    MediaQuery,
    MediaRule,
    PartialRule,
    Rule,
    StyleBlock,
)

logger = logging.getLogger(__name__)

_STRATEGIES = ("media", "class", "attribute")


def extract_rule(
    rule: Rule, state: CompilerState, partial: PartialRule = PartialRule()
) -> None:
    """Extract one AST rule (and its children) into *state*."""
    if isinstance(rule, KeyframesRule):
        state.keyframes[rule.name] = extract_keyframes(rule, state)
    elif isinstance(rule, ContainerRule):
        _extract_container(rule, state, partial)
    elif isinstance(rule, MediaRule):
        _extract_media(rule, state, partial)
    elif isinstance(rule, StyleBlock):
        _extract_style(rule, state, partial)
    elif isinstance(rule, CustomAtRule):
        if rule.name == "cssInterop":
            apply_interop_directive(rule, state)
    else:
        logger.debug("Skipping rule of kind %r", rule.kind)


def _extract_container(
    rule: ContainerRule, state: CompilerState, partial: PartialRule
) -> None:
    frame = ContainerQuery(name=rule.name, condition=rule.condition)
    inner = partial.extend(container_query=(frame,))
    for child in rule.rules:
        extract_rule(child, state, inner)


def is_applicable_media(query: MediaQuery) -> bool:
    """Return False for queries that can never match a native screen.

    ``print`` queries are dropped, as are ``not <type>`` queries with no
    further condition. ``not print and (min-width: 0)`` is kept.
    """
    media_type = (query.media_type or "").lower()
    qualifier = (query.qualifier or "").lower()
    if media_type == "print" and qualifier != "not":
        return False
    if qualifier == "not" and not query.condition:
        return False
    return True


def _extract_media(rule: MediaRule, state: CompilerState, partial: PartialRule) -> None:
    media = tuple(q for q in rule.queries if is_applicable_media(q))
    if not media:
        logger.debug("Skipping @media %s", ", ".join(str(q) for q in rule.queries))
        return
    inner = partial.extend(media=media)
    for child in rule.rules:
        extract_rule(child, state, inner)


def _extract_style(block: StyleBlock, state: CompilerState, partial: PartialRule) -> None:
    if not block.has_declarations:
        return

    relocations = build_relocation_table(block.rules)
    for style in compile_style_block(block, state, relocations):
        route_rule(partial.apply_to(style), block.selectors, state)

    # One step per block, however many selectors or buckets it produced
    state.appearance_order += 1


def _dark_mode(strategy: str | None, value: str | None) -> DarkMode | None:
    if strategy == "media" or value is None:
        return DarkMode("media")
    if value.startswith("."):
        return DarkMode("class", value[1:])
    if value.startswith("["):
        return DarkMode("attribute", value)
    if strategy == "class" or value == "dark":
        return DarkMode("class", value)
    return None


def apply_interop_directive(rule: CustomAtRule, state: CompilerState) -> None:
    """Apply a ``@cssInterop set <name> ...`` directive.

    ``darkMode`` configures dark-mode detection, e.g.
    ``@cssInterop set darkMode class dark`` or ``@cssInterop set darkMode [data-theme=dark]``.
    Any other name is stored in the output flags: ``set <name> <type> [values...]``
    stores the values after ``<type>``, or True when there are none.
    """
    if len(rule.prelude) < 2 or rule.prelude[0] != "set":
        logger.debug("Ignoring @cssInterop directive %r", " ".join(rule.prelude))
        return

    name, *rest = rule.prelude[1:]

    if name != "darkMode":
        values = rest[1:]
        state.flags[name] = list(values) if values else True
        return

    strategy = rest[0] if rest and rest[0] in _STRATEGIES else None
    values = rest[1:] if strategy else rest
    value = values[0] if values else None

    dark_mode = _dark_mode(strategy, value)
    if dark_mode is None:
        logger.debug("Unrecognised darkMode value %r", value)
        return
    state.dark_mode = dark_mode
    state.flags["darkMode"] = f"{dark_mode.type} {dark_mode.value or ''}".strip()
