"""CSS source to compiler AST, built on tinycss2."""

from __future__ import annotations

import logging
from typing import Iterable

import tinycss2
from tinycss2 import ast as css

from native_css.compiler.errors import StylesheetParseError
from native_css.model import (
    ContainerRule,
    CustomAtRule,
    Declaration,
    Keyframe,
    KeyframeSelector,
    KeyframesRule,
    MediaQuery,
    MediaRule,
    Rule,
    StyleBlock,
)

__all__ = ["parse_stylesheet", "parse_media_queries", "split_commas"]

logger = logging.getLogger(__name__)

_KEYFRAMES = {"keyframes", "-webkit-keyframes"}


def split_commas(tokens: Iterable[css.Node]) -> list[list[css.Node]]:
    """Split a component value list on top-level commas."""
    parts: list[list[css.Node]] = [[]]
    for token in tokens:
        if token.type == "literal" and token.value == ",":
            parts.append([])
        else:
            parts[-1].append(token)
    return parts


def _significant(tokens: Iterable[css.Node]) -> list[css.Node]:
    return [t for t in tokens if t.type not in ("whitespace", "comment")]


def _is_ident(token: css.Node, *values: str) -> bool:
    return token.type == "ident" and (not values or token.lower_value in values)


def _media_query(tokens: list[css.Node]) -> MediaQuery:
    significant = [(i, t) for i, t in enumerate(tokens) if t.type not in ("whitespace", "comment")]
    qualifier = media_type = None
    pos = 0

    if (
        len(significant) > 1
        and _is_ident(significant[0][1], "not", "only")
        and _is_ident(significant[1][1])
    ):
        qualifier = significant[0][1].lower_value
        pos = 1
    if pos < len(significant) and _is_ident(significant[pos][1]) and not _is_ident(
        significant[pos][1], "not"
    ):
        media_type = significant[pos][1].lower_value
        pos += 1
        if pos < len(significant) and _is_ident(significant[pos][1], "and"):
            pos += 1

    condition = None
    if pos < len(significant):
        condition = tinycss2.serialize(tokens[significant[pos][0]:]).strip() or None
    return MediaQuery(media_type=media_type, qualifier=qualifier, condition=condition)


def parse_media_queries(prelude: Iterable[css.Node]) -> tuple[MediaQuery, ...]:
    """Parse a media query list such as ``screen and (min-width: 640px), print``."""
    return tuple(
        _media_query(part) for part in split_commas(prelude) if _significant(part)
    )


def _declarations(content: list[css.Node]) -> tuple[list[css.Declaration], list[css.AtRule]]:
    declarations: list[css.Declaration] = []
    at_rules: list[css.AtRule] = []
    for item in tinycss2.parse_blocks_contents(
        content, skip_comments=True, skip_whitespace=True
    ):
        if item.type == "declaration":
            declarations.append(item)
        elif item.type == "at-rule":
            at_rules.append(item)
        elif item.type == "error":
            logger.debug("Dropping invalid declaration: %s", item.message)
        else:
            logger.debug("Skipping nested %s", item.type)
    return declarations, at_rules


def _declaration(item: css.Declaration) -> Declaration:
    name = item.name if item.name.startswith("--") else item.lower_name
    return Declaration(property=name, value=tinycss2.serialize(item.value).strip())


def _custom(rule: css.AtRule, name: str) -> CustomAtRule:
    return CustomAtRule(name=name, prelude=tuple(tinycss2.serialize(rule.prelude).split()))


def _style_block(rule: css.QualifiedRule) -> StyleBlock:
    selectors = tuple(
        text
        for text in (tinycss2.serialize(part).strip() for part in split_commas(rule.prelude))
        if text
    )
    items, at_rules = _declarations(rule.content)
    normal = tuple(_declaration(d) for d in items if not d.important)
    important = tuple(_declaration(d) for d in items if d.important)
    moves = tuple(_custom(r, "rn-move") for r in at_rules if r.lower_at_keyword == "rn-move")
    return StyleBlock(
        selectors=selectors,
        declarations=normal,
        important_declarations=important,
        rules=moves,
    )


def _keyframe_selector(tokens: list[css.Node]) -> KeyframeSelector:
    significant = _significant(tokens)
    if len(significant) == 1:
        token = significant[0]
        if _is_ident(token, "from"):
            return KeyframeSelector("from")
        if _is_ident(token, "to"):
            return KeyframeSelector("to")
        if token.type == "percentage":
            return KeyframeSelector("percentage", token.value / 100)
    # e.g. ``entry 10%``
    percentage = next((t.value / 100 for t in significant if t.type == "percentage"), None)
    return KeyframeSelector("timeline-range-percentage", percentage)


def _keyframes(rule: css.AtRule) -> KeyframesRule:
    prelude = _significant(rule.prelude)
    if len(prelude) == 1 and prelude[0].type in ("ident", "string"):
        name = prelude[0].value
    else:
        name = tinycss2.serialize(rule.prelude).strip()

    keyframes = []
    for frame in tinycss2.parse_rule_list(rule.content or [], skip_comments=True, skip_whitespace=True):
        if frame.type != "qualified-rule":
            continue
        selectors = tuple(
            _keyframe_selector(part) for part in split_commas(frame.prelude) if _significant(part)
        )
        items, _ = _declarations(frame.content)
        # !important is ignored inside keyframes
        declarations = tuple(_declaration(d) for d in items if not d.important)
        keyframes.append(Keyframe(selectors=selectors, declarations=declarations))
    return KeyframesRule(name=name, keyframes=tuple(keyframes))


def _container(rule: css.AtRule) -> ContainerRule:
    significant = [(i, t) for i, t in enumerate(rule.prelude) if t.type not in ("whitespace", "comment")]
    name = None
    start = significant[0][0] if significant else len(rule.prelude)
    if significant and _is_ident(significant[0][1]) and not _is_ident(significant[0][1], "not"):
        name = significant[0][1].value
        start = significant[1][0] if len(significant) > 1 else len(rule.prelude)
    condition = tinycss2.serialize(rule.prelude[start:]).strip()
    return ContainerRule(name=name, condition=condition, rules=tuple(_child_rules(rule)))


def _child_rules(rule: css.AtRule) -> list[Rule]:
    if rule.content is None:
        return []
    return _convert(tinycss2.parse_rule_list(rule.content, skip_comments=True, skip_whitespace=True))


def _at_rule(rule: css.AtRule) -> Rule | None:
    keyword = rule.lower_at_keyword
    if keyword == "media":
        return MediaRule(queries=parse_media_queries(rule.prelude), rules=tuple(_child_rules(rule)))
    if keyword == "container":
        return _container(rule)
    if keyword in _KEYFRAMES:
        return _keyframes(rule)
    if keyword == "cssinterop":
        return _custom(rule, "cssInterop")
    logger.debug("Skipping @%s", rule.at_keyword)
    return None


def _convert(nodes: Iterable[css.Node]) -> list[Rule]:
    rules: list[Rule] = []
    for node in nodes:
        if node.type == "error":
            raise StylesheetParseError(node.message, node.source_line, node.source_column)
        if node.type == "qualified-rule":
            rules.append(_style_block(node))
        elif node.type == "at-rule":
            converted = _at_rule(node)
            if converted is not None:
                rules.append(converted)
    return rules


def parse_stylesheet(source: str) -> list[Rule]:
    """Parse CSS *source* into a list of top-level AST rules.

    Raises:
        StylesheetParseError: on a malformed top-level rule.
    """
    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    return _convert(nodes)
