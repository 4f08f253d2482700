"""Stylesheet AST consumed by the compiler.

The tree is produced upstream (see :mod:`native_css.parser.stylesheet`) and
is never mutated by the compiler. Every node exposes a ``kind`` tag used for
dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair with the value kept as raw CSS text."""

    property: str
    value: str


@dataclass(frozen=True)
class MediaQuery:
    """One query of a media query list, e.g. ``not print and (min-width: 0)``."""

    media_type: str | None = None
    qualifier: str | None = None  # "not", "only"
    condition: str | None = None

    def __str__(self) -> str:
        parts = [p for p in (self.qualifier, self.media_type) if p]
        if self.condition:
            if parts:
                parts.append("and")
            parts.append(self.condition)
        return " ".join(parts)


@dataclass(frozen=True)
class CustomAtRule:
    """``@cssInterop`` and ``@rn-move``; the prelude is split into tokens."""

    kind: ClassVar[str] = "custom"

    name: str
    prelude: tuple[str, ...] = ()


@dataclass(frozen=True)
class StyleBlock:
    kind: ClassVar[str] = "style"

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...] = ()
    important_declarations: tuple[Declaration, ...] = ()
    rules: tuple[CustomAtRule, ...] = ()

    @property
    def has_declarations(self) -> bool:
        return bool(self.declarations or self.important_declarations)


@dataclass(frozen=True)
class MediaRule:
    kind: ClassVar[str] = "media"

    queries: tuple[MediaQuery, ...]
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class ContainerRule:
    kind: ClassVar[str] = "container"

    name: str | None
    condition: str
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class KeyframeSelector:
    """``from``, ``to``, ``percentage`` or ``timeline-range-percentage``.

    ``value`` is the fraction in [0, 1] for percentages.
    """

    type: str
    value: float | None = None


@dataclass(frozen=True)
class Keyframe:
    selectors: tuple[KeyframeSelector, ...]
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class KeyframesRule:
    kind: ClassVar[str] = "keyframes"

    name: str
    keyframes: tuple[Keyframe, ...] = field(default_factory=tuple)


Rule = Union[StyleBlock, MediaRule, ContainerRule, KeyframesRule, CustomAtRule]
