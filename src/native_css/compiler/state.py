"""Transient compiler state owned by a single compile invocation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from native_css.compiler.options import (
    CompilerOptions,
    DarkMode,
    DeclarationParser,
    SelectorNormalizer,
    compile_patterns,
)
from native_css.model import ExtractedAnimation, StyleRule


@dataclass
class CompilerState:
    """Mutable state threaded through one synchronous AST traversal.

    Created at compile start, read once to assemble the output, then
    discarded. Never shared between invocations.
    """

    selector_normalizer: SelectorNormalizer
    declaration_parser: DeclarationParser
    dark_mode: DarkMode = DarkMode()
    grouping: tuple[re.Pattern[str], ...] = ()
    ignore_property_warnings: tuple[re.Pattern[str], ...] = ()
    rules: dict[str, list[StyleRule]] = field(default_factory=dict)
    keyframes: dict[str, ExtractedAnimation] = field(default_factory=dict)
    root_variables: dict[str, dict[str, Any]] = field(default_factory=dict)
    universal_variables: dict[str, dict[str, Any]] = field(default_factory=dict)
    flags: dict[str, Any] = field(default_factory=dict)
    appearance_order: int = 1
    rem: float | None = None

    @classmethod
    def from_options(cls, options: CompilerOptions) -> CompilerState:
        from native_css.parser import normalize_selectors, parse_declaration

        return cls(
            selector_normalizer=options.selector_normalizer or normalize_selectors,
            declaration_parser=options.declaration_parser or parse_declaration,
            dark_mode=options.dark_mode,
            grouping=compile_patterns(options.grouping),
            ignore_property_warnings=compile_patterns(
                options.ignore_property_warning_patterns
            ),
        )

    def is_group(self, class_name: str) -> bool:
        """True if *class_name* matches one of the grouping patterns."""
        return any(p.search(class_name) for p in self.grouping)

    def ignores_warning(self, property: str) -> bool:
        return any(p.search(property) for p in self.ignore_property_warnings)
