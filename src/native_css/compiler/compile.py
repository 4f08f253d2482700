"""Top-level compile entry points."""

from __future__ import annotations

import logging
from typing import Iterable

from native_css.compiler.aggregate import build_rule_sets
from native_css.compiler.extractor import extract_rule
from native_css.compiler.options import CompilerOptions
from native_css.compiler.state import CompilerState
from native_css.model import CompiledStyles, Rule
from native_css.optimize import optimize_rules

logger = logging.getLogger(__name__)


def compile_rules(
    rules: Iterable[Rule], options: CompilerOptions | None = None
) -> CompiledStyles:
    """Compile a parsed stylesheet into a :class:`CompiledStyles` bundle."""
    options = options or CompilerOptions()
    state = CompilerState.from_options(options)

    count = 0
    for rule in rules:
        extract_rule(rule, state)
        count += 1
    logger.debug("Extraction of %d rule(s) finished", count)

    rule_sets = build_rule_sets(state.rules)
    optimizer = options.optimizer or optimize_rules
    rule_sets = optimizer(rule_sets)
    logger.debug("Rule set count: %d", len(rule_sets))

    return CompiledStyles(
        rules=rule_sets,
        keyframes=list(state.keyframes.items()),
        root_variables=state.root_variables,
        universal_variables=state.universal_variables,
        flags=state.flags,
        rem=state.rem,
    )


def compile_css(source: str, options: CompilerOptions | None = None) -> CompiledStyles:
    """Parse CSS *source* and compile it.

    Raises:
        StylesheetParseError: if the source cannot be parsed.
        AnimationValueError: if a keyframe animates a structured value.
    """
    from native_css.parser import parse_stylesheet

    return compile_rules(parse_stylesheet(source), options)
