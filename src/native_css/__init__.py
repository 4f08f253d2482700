"""Compile stylesheets into pre-resolved style rules for native renderers."""

from native_css.compiler import (
    AnimationValueError,
    CompileError,
    CompilerOptions,
    DarkMode,
    StylesheetParseError,
    compile_css,
    compile_rules,
)
from native_css.model import CompiledStyles, Specificity, StyleRule, StyleRuleSet

__version__ = "0.1.0"

__all__ = [
    "AnimationValueError",
    "CompileError",
    "CompiledStyles",
    "CompilerOptions",
    "DarkMode",
    "Specificity",
    "StyleRule",
    "StyleRuleSet",
    "StylesheetParseError",
    "compile_css",
    "compile_rules",
]
