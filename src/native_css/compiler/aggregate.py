"""Rule aggregation: routes compiled rules to selector keys and builds rule sets."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable

from native_css.compiler.state import CompilerState
from native_css.model import (
    ClassNameSelector,
    ContainerInfo,
    ContainerQuery,
    RootVariableSelector,
    StyleRule,
    StyleRuleSet,
    UniversalVariableSelector,
)

logger = logging.getLogger(__name__)


def add_declaration(rules: dict[str, list[StyleRule]], key: str, rule: StyleRule) -> None:
    """Append *rule* under *key*; keys are never deduplicated."""
    rules.setdefault(key, []).append(rule)


def route_rule(rule: StyleRule, selectors: Iterable[str], state: CompilerState) -> None:
    """Route a compiled rule to every selector variant of a selector list."""
    for selector in selectors:
        matched = False
        for variant in state.selector_normalizer(selector, rule, state):
            matched = True
            if isinstance(variant, (RootVariableSelector, UniversalVariableSelector)):
                _merge_variables(rule, variant, state)
            else:
                _add_class_rule(rule, variant, state)
        if not matched:
            logger.debug("Unsupported selector %r", selector)


def _merge_variables(
    rule: StyleRule,
    selector: RootVariableSelector | UniversalVariableSelector,
    state: CompilerState,
) -> None:
    font_size = None
    for declaration in rule.declarations:
        value = declaration.value
        if (
            declaration.target == "fontSize"
            and isinstance(value, (int, float))
            and not isinstance(value, bool)
        ):
            font_size = value
    if font_size is not None:
        state.rem = font_size

    if not rule.variables:
        return

    if isinstance(selector, RootVariableSelector):
        record = state.root_variables
    else:
        record = state.universal_variables
    for name, value in rule.variables:
        record.setdefault(name, {})[selector.subtype] = value


def _add_class_rule(
    rule: StyleRule, selector: ClassNameSelector, state: CompilerState
) -> None:
    specificity = rule.specificity + selector.specificity
    container_query = list(rule.container_query or [])

    if selector.group_class_name:
        group = selector.group_class_name
        add_declaration(
            state.rules,
            group,
            StyleRule(
                specificity=specificity,
                attrs=selector.attrs,
                container=ContainerInfo(names=[group]),
            ),
        )
        container_query.append(
            ContainerQuery(
                name=group,
                pseudo_classes=selector.group_pseudo_classes,
                attrs=selector.group_attrs,
            )
        )

    media = list(rule.media or []) + list(selector.media or [])

    add_declaration(
        state.rules,
        selector.class_name,
        replace(
            rule,
            specificity=specificity,
            pseudo_classes=selector.pseudo_classes,
            attrs=selector.attrs,
            media=media or None,
            container_query=container_query or None,
        ),
    )


def build_rule_sets(
    rules: dict[str, list[StyleRule]],
) -> list[tuple[str, StyleRuleSet]]:
    """Partition each key's rules into normal/important buckets and derive flags."""
    rule_sets: list[tuple[str, StyleRuleSet]] = []

    for key, styles in rules.items():
        if not styles:
            continue

        rule_set = StyleRuleSet()
        for style in styles:
            if style.warnings:
                if rule_set.warnings is None:
                    rule_set.warnings = []
                rule_set.warnings.extend(style.warnings)

            if style.is_empty:
                continue
            style = replace(style, warnings=None)

            if style.specificity.is_important:
                if rule_set.important is None:
                    rule_set.important = []
                rule_set.important.append(style)
            else:
                if rule_set.normal is None:
                    rule_set.normal = []
                rule_set.normal.append(style)

            if style.variables:
                rule_set.variables = True
            if style.container:
                rule_set.container = True
            if style.animations or style.transition:
                rule_set.animation = True
            pseudo_classes = style.pseudo_classes or frozenset()
            if "hover" in pseudo_classes:
                rule_set.hover = True
            if "active" in pseudo_classes:
                rule_set.active = True
            if "focus" in pseudo_classes:
                rule_set.focus = True

        if rule_set.normal or rule_set.important or rule_set.warnings:
            rule_sets.append((key, rule_set))

    return rule_sets
