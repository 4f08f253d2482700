"""``@rn-move`` relocation tables.

A relocation table maps a native property name, or the ``*`` wildcard, to
the path its compiled declaration is moved to.
"""

from __future__ import annotations

import logging
from typing import Iterable

from native_css.model import CustomAtRule
from native_css.naming import to_native_property

logger = logging.getLogger(__name__)

WILDCARD = "*"
# Paths starting with this marker stay under the ``style`` prop.
STYLE_MARKER = "&"

RelocationTable = dict[str, tuple[str, ...]]


def _path(tokens: str) -> tuple[str, ...]:
    if tokens.startswith(STYLE_MARKER):
        tokens = tokens[len(STYLE_MARKER):]
        return ("style", *(to_native_property(t) for t in tokens.split(".")))
    return tuple(to_native_property(t) for t in tokens.split("."))


def build_relocation_table(rules: Iterable[CustomAtRule]) -> RelocationTable:
    """Collect the ``@rn-move`` directives nested in a style block.

    ``@rn-move color &text.color`` moves ``color`` to ``style.text.color``;
    ``@rn-move fill`` moves every other property in the block under ``fill``.
    """
    table: RelocationTable = {}
    for rule in rules:
        if rule.kind != "custom" or rule.name != "rn-move" or not rule.prelude:
            continue
        first, *rest = rule.prelude
        if rest:
            table[to_native_property(first)] = _path(rest[0])
        else:
            table[WILDCARD] = _path(first)
    if table:
        logger.debug("Relocation table %s", table)
    return table


def resolve_relocation(
    table: RelocationTable,
    name: str,
    override: tuple[str, ...] | None = None,
) -> tuple[str, ...] | None:
    """Resolve where a property's declaration is placed.

    An explicit override wins, then the property's own entry, then the
    wildcard entry. None means the bare property name is the target.
    """
    if override:
        return tuple(override)
    if name in table:
        return table[name]
    if WILDCARD in table:
        return table[WILDCARD]
    return None
