"""JSON-ready serialisation of a compiled bundle."""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from native_css.model import (
    AnimationFrame,
    CompiledStyles,
    ContainerInfo,
    ContainerQuery,
    EasingFunction,
    ExtractedAnimation,
    RuntimeFunction,
    StyleRule,
    StyleRuleSet,
    Time,
    TransitionInfo,
)
from native_css.naming import to_native_property


def value_to_json(value: Any) -> Any:
    """Convert a runtime-value descriptor to plain JSON types."""
    if isinstance(value, RuntimeFunction):
        data: dict[str, Any] = {"fn": value.name, "args": [value_to_json(a) for a in value.args]}
        if value.delay:
            data["delay"] = True
        return data
    if isinstance(value, Time):
        return str(value)
    if isinstance(value, EasingFunction):
        if not value.args:
            return value.type
        return {"type": value.type, "args": [value_to_json(a) for a in value.args]}
    if isinstance(value, (list, tuple)):
        return [value_to_json(v) for v in value]
    if isinstance(value, dict):
        return {k: value_to_json(v) for k, v in value.items()}
    return value


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if not (v is None or v is False or v == [] or v == {})}


def _transition(transition: TransitionInfo) -> dict[str, Any]:
    return _compact(
        {to_native_property(f.name.replace("_", "-")): value_to_json(getattr(transition, f.name)) for f in fields(transition)}
    )


def _container(container: ContainerInfo) -> dict[str, Any]:
    return {"names": container.names, "type": container.type}


def _container_query(query: ContainerQuery) -> dict[str, Any]:
    return _compact(
        {
            "name": query.name,
            "condition": query.condition,
            "pseudoClasses": sorted(query.pseudo_classes or ()),
            "attrs": [str(a) for a in query.attrs or ()],
        }
    )


def rule_to_dict(rule: StyleRule) -> dict[str, Any]:
    return _compact(
        {
            "s": rule.specificity.as_list(),
            "d": [value_to_json(list(d.as_tuple())) for d in rule.declarations],
            "variables": [[name, value_to_json(v)] for name, v in rule.variables or ()],
            "media": [str(q) for q in rule.media or ()],
            "containerQuery": [_container_query(q) for q in rule.container_query or ()],
            "pseudoClasses": sorted(rule.pseudo_classes or ()),
            "attrs": [str(a) for a in rule.attrs or ()],
            "animations": value_to_json(rule.animations),
            "transition": _transition(rule.transition) if rule.transition else None,
            "container": _container(rule.container) if rule.container else None,
            "requiresLayoutWidth": rule.requires_layout_width,
            "requiresLayoutHeight": rule.requires_layout_height,
        }
    )


def rule_set_to_dict(rule_set: StyleRuleSet) -> dict[str, Any]:
    return _compact(
        {
            "normal": [rule_to_dict(r) for r in rule_set.normal or ()],
            "important": [rule_to_dict(r) for r in rule_set.important or ()],
            "warnings": [str(w) for w in rule_set.warnings or ()],
            "variables": rule_set.variables,
            "container": rule_set.container,
            "animation": rule_set.animation,
            "hover": rule_set.hover,
            "active": rule_set.active,
            "focus": rule_set.focus,
        }
    )


def _frame(frame: AnimationFrame) -> dict[str, Any]:
    return {"value": value_to_json(frame.value), "progress": frame.progress}


def animation_to_dict(animation: ExtractedAnimation) -> dict[str, Any]:
    return _compact(
        {
            "frames": [[prop, [_frame(f) for f in frames]] for prop, frames in animation.frames.items()],
            "easingFunctions": value_to_json(animation.easing_functions),
            "requiresLayoutWidth": animation.requires_layout_width,
            "requiresLayoutHeight": animation.requires_layout_height,
        }
    )


def to_dict(compiled: CompiledStyles) -> dict[str, Any]:
    data: dict[str, Any] = {
        "$compiled": compiled.compiled,
        "rules": [[key, rule_set_to_dict(rs)] for key, rs in compiled.rules],
        "keyframes": [[name, animation_to_dict(a)] for name, a in compiled.keyframes],
        "rootVariables": value_to_json(compiled.root_variables),
        "universalVariables": value_to_json(compiled.universal_variables),
        "flags": compiled.flags,
    }
    if compiled.rem is not None:
        data["rem"] = compiled.rem
    return data


def to_json(compiled: CompiledStyles, indent: int | None = 2) -> str:
    return json.dumps(to_dict(compiled), indent=indent)
