"""Data model for the stylesheet compiler."""

from native_css.model.ast import (
    ContainerRule,
    CustomAtRule,
    Declaration,
    Keyframe,
    KeyframeSelector,
    KeyframesRule,
    MediaQuery,
    MediaRule,
    Rule,
    StyleBlock,
)
from native_css.model.rule import (
    DEFAULT_CONTAINER_NAME,
    AnimationFrame,
    CompiledStyles,
    ContainerInfo,
    ContainerQuery,
    ContainerValue,
    ExtractedAnimation,
    ExtractionWarning,
    PartialRule,
    StyleDeclaration,
    StyleRule,
    StyleRuleSet,
    TransitionInfo,
    TransitionLayer,
)
from native_css.model.selectors import (
    AttributeSelector,
    ClassNameSelector,
    RootVariableSelector,
    SelectorVariant,
    UniversalVariableSelector,
)
from native_css.model.specificity import ANIMATION_IMPORTANCE, Specificity
from native_css.model.values import (
    INHERIT,
    PLACEHOLDER_EASING,
    EasingFunction,
    RuntimeFunction,
    RuntimeValue,
    Time,
    is_deferred,
    is_runtime_descriptor,
)

__all__ = [
    "ANIMATION_IMPORTANCE",
    "DEFAULT_CONTAINER_NAME",
    "INHERIT",
    "PLACEHOLDER_EASING",
    "AnimationFrame",
    "AttributeSelector",
    "ClassNameSelector",
    "CompiledStyles",
    "ContainerInfo",
    "ContainerQuery",
    "ContainerRule",
    "ContainerValue",
    "CustomAtRule",
    "Declaration",
    "EasingFunction",
    "ExtractedAnimation",
    "ExtractionWarning",
    "Keyframe",
    "KeyframeSelector",
    "KeyframesRule",
    "MediaQuery",
    "MediaRule",
    "PartialRule",
    "RootVariableSelector",
    "Rule",
    "RuntimeFunction",
    "RuntimeValue",
    "SelectorVariant",
    "Specificity",
    "StyleBlock",
    "StyleDeclaration",
    "StyleRule",
    "StyleRuleSet",
    "Time",
    "TransitionInfo",
    "TransitionLayer",
    "UniversalVariableSelector",
    "is_deferred",
    "is_runtime_descriptor",
]
