"""Stylesheet compiler: AST to pre-resolved style rules."""

from native_css.compiler.aggregate import add_declaration, build_rule_sets, route_rule
from native_css.compiler.compile import compile_css, compile_rules
from native_css.compiler.declarations import DeclarationCompiler, compile_style_block
from native_css.compiler.errors import (
    AnimationValueError,
    CompileError,
    StylesheetParseError,
)
from native_css.compiler.extractor import (
    apply_interop_directive,
    extract_rule,
    is_applicable_media,
)
from native_css.compiler.handlers import PropertyHandlers
from native_css.compiler.keyframes import extract_keyframes, keyframe_progress
from native_css.compiler.options import CompilerOptions, DarkMode
from native_css.compiler.relocation import build_relocation_table, resolve_relocation
from native_css.compiler.state import CompilerState

__all__ = [
    "AnimationValueError",
    "CompileError",
    "CompilerOptions",
    "CompilerState",
    "DarkMode",
    "DeclarationCompiler",
    "PropertyHandlers",
    "StylesheetParseError",
    "add_declaration",
    "apply_interop_directive",
    "build_relocation_table",
    "build_rule_sets",
    "compile_css",
    "compile_rules",
    "compile_style_block",
    "extract_keyframes",
    "extract_rule",
    "is_applicable_media",
    "keyframe_progress",
    "resolve_relocation",
    "route_rule",
]
