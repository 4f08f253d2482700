"""Reference upstream collaborators: stylesheet parser, selector classifier, value parser."""

from native_css.parser.selectors import normalize_selectors
from native_css.parser.stylesheet import parse_media_queries, parse_stylesheet
from native_css.parser.values import parse_declaration, parse_value

__all__ = [
    "normalize_selectors",
    "parse_declaration",
    "parse_media_queries",
    "parse_stylesheet",
    "parse_value",
]
