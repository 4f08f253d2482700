"""Selector classifier: raw selector text to tagged selector variants."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

import tinycss2

from native_css.model import (
    AttributeSelector,
    ClassNameSelector,
    MediaQuery,
    RootVariableSelector,
    SelectorVariant,
    Specificity,
    StyleRule,
    UniversalVariableSelector,
)

if TYPE_CHECKING:
    from native_css.compiler.state import CompilerState

logger = logging.getLogger(__name__)

DARK_MEDIA = MediaQuery(condition="(prefers-color-scheme: dark)")


@dataclass
class _Compound:
    classes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    attrs: list[AttributeSelector] = field(default_factory=list)
    root: bool = False
    universal: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.classes or self.pseudo_classes or self.attrs or self.root or self.universal)

    @property
    def weight(self) -> int:
        return len(self.classes) + len(self.pseudo_classes) + len(self.attrs) + int(self.root)


def _attribute(content: list) -> AttributeSelector | None:
    tokens = [t for t in content if t.type not in ("whitespace", "comment")]
    if not tokens or tokens[0].type != "ident":
        return None
    name = tokens[0].value
    operator = ""
    index = 1
    while index < len(tokens) and tokens[index].type == "literal":
        operator += tokens[index].value
        index += 1
    if not operator:
        return AttributeSelector(name)
    if index >= len(tokens) or tokens[index].type not in ("ident", "string"):
        return None
    return AttributeSelector(name, operator, tokens[index].value)


def _compounds(selector: str) -> list[_Compound] | None:
    """Split a selector into descendant compounds, or None if unsupported."""
    tokens = tinycss2.parse_component_value_list(selector, skip_comments=True)
    compounds = [_Compound()]
    index = 0

    while index < len(tokens):
        token = tokens[index]
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        current = compounds[-1]

        if token.type == "whitespace":
            if not current.is_empty:
                compounds.append(_Compound())
        elif token.type == "literal" and token.value == "." and following is not None and following.type == "ident":
            current.classes.append(following.value)
            index += 1
        elif token.type == "literal" and token.value == ":" and following is not None and following.type == "ident":
            if following.lower_value == "root":
                current.root = True
            else:
                current.pseudo_classes.append(following.lower_value)
            index += 1
        elif token.type == "literal" and token.value == "*":
            current.universal = True
        elif token.type == "[] block":
            attribute = _attribute(token.content)
            if attribute is None:
                return None
            current.attrs.append(attribute)
        else:
            # type selectors, ids, pseudo-elements, functional pseudo-classes
            # and non-descendant combinators
            return None
        index += 1

    if compounds[-1].is_empty:
        compounds.pop()
    return compounds or None


def _normalize_attr(text: str) -> str:
    return "".join(text.split()).replace('"', "").replace("'", "")


def _is_dark_marker(compound: _Compound, state: CompilerState) -> bool:
    dark_mode = state.dark_mode
    if dark_mode.type == "class":
        return dark_mode.value in compound.classes
    if dark_mode.type == "attribute" and dark_mode.value:
        expected = _normalize_attr(dark_mode.value)
        return any(_normalize_attr(str(attr)) == expected for attr in compound.attrs)
    return False


def _has_dark_media(rule: StyleRule) -> bool:
    for query in rule.media or ():
        condition = "".join((query.condition or "").split()).lower()
        if "prefers-color-scheme:dark" in condition:
            return True
    return False


def _variable_selector(
    compounds: list[_Compound], rule: StyleRule, state: CompilerState
) -> SelectorVariant | None:
    *ancestors, subject = compounds
    if any(not _is_dark_marker(a, state) for a in ancestors):
        return None

    if state.dark_mode.type == "media":
        dark = _has_dark_media(rule)
    else:
        dark = any(_is_dark_marker(c, state) for c in compounds)
    subtype = "dark" if dark else "default"

    if subject.root:
        return RootVariableSelector(subtype=subtype)
    return UniversalVariableSelector(subtype=subtype)


def _class_selector(
    compounds: list[_Compound], state: CompilerState
) -> ClassNameSelector | None:
    *ancestors, subject = compounds
    if len(subject.classes) != 1 or len(ancestors) > 1:
        return None

    specificity = Specificity(class_name=sum(c.weight for c in compounds))
    selector = ClassNameSelector(
        class_name=subject.classes[0],
        specificity=specificity,
        pseudo_classes=frozenset(subject.pseudo_classes) or None,
        attrs=tuple(subject.attrs) or None,
    )
    if not ancestors:
        return selector

    ancestor = ancestors[0]
    if _is_dark_marker(ancestor, state):
        return ClassNameSelector(
            class_name=selector.class_name,
            specificity=specificity,
            pseudo_classes=selector.pseudo_classes,
            attrs=selector.attrs,
            media=(DARK_MEDIA,),
        )
    if len(ancestor.classes) == 1 and state.is_group(ancestor.classes[0]):
        return ClassNameSelector(
            class_name=selector.class_name,
            specificity=specificity,
            pseudo_classes=selector.pseudo_classes,
            attrs=selector.attrs,
            group_class_name=ancestor.classes[0],
            group_pseudo_classes=frozenset(ancestor.pseudo_classes) or None,
            group_attrs=tuple(ancestor.attrs) or None,
        )
    return None


def normalize_selectors(
    selector: str, rule: StyleRule, state: CompilerState
) -> Iterator[SelectorVariant]:
    """Classify *selector*, yielding nothing when it is unsupported.

    Supported forms::

        .btn  .btn:hover  .btn[data-open]     class-based
        .group:hover .child                   group container (see ``grouping``)
        .dark .btn                            dark variant (class/attribute mode)
        :root  :root[data-theme=dark]         root variables
        *  .dark *                            universal variables
    """
    compounds = _compounds(selector)
    if compounds is None:
        return

    subject = compounds[-1]
    if subject.root or (subject.universal and not subject.classes):
        variant = _variable_selector(compounds, rule, state)
    else:
        variant = _class_selector(compounds, state)

    if variant is not None:
        yield variant
