"""Compiler configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Literal, Protocol

if TYPE_CHECKING:
    from native_css.compiler.handlers import PropertyHandlers
    from native_css.compiler.state import CompilerState
    from native_css.model import Declaration, SelectorVariant, StyleRule


@dataclass(frozen=True)
class DarkMode:
    """How dark-mode variants are detected.

    ``media`` uses ``prefers-color-scheme``; ``class`` and ``attribute`` match
    a class name or an attribute selector on an ancestor.
    """

    type: Literal["media", "class", "attribute"] = "media"
    value: str | None = None


class SelectorNormalizer(Protocol):
    """Classifies a raw selector into tagged variants (consumed once)."""

    def __call__(
        self, selector: str, rule: StyleRule, state: CompilerState
    ) -> Iterator[SelectorVariant]: ...


class DeclarationParser(Protocol):
    """Parses one declaration and invokes exactly one handler."""

    def __call__(self, declaration: Declaration, handlers: PropertyHandlers) -> None: ...


Optimizer = Callable[[list], list]


@dataclass(frozen=True)
class CompilerOptions:
    grouping: tuple[str | re.Pattern[str], ...] = ()
    ignore_property_warning_patterns: tuple[str | re.Pattern[str], ...] = ()
    dark_mode: DarkMode = DarkMode()
    optimizer: Optimizer | None = None
    selector_normalizer: SelectorNormalizer | None = None
    declaration_parser: DeclarationParser | None = None


def compile_patterns(
    patterns: tuple[str | re.Pattern[str], ...],
) -> tuple[re.Pattern[str], ...]:
    """Compile string patterns; already compiled patterns pass through."""
    return tuple(p if isinstance(p, re.Pattern) else re.compile(p) for p in patterns)
