"""Compiled rule model: StyleRule, StyleRuleSet, animations and the output bundle."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from native_css.model.ast import MediaQuery
from native_css.model.selectors import AttributeSelector
from native_css.model.specificity import Specificity
from native_css.model.values import EasingFunction, Time

# Container name declared by ``container-type`` when no name is given.
DEFAULT_CONTAINER_NAME = "___default___"


@dataclass(frozen=True)
class StyleDeclaration:
    """One compiled declaration.

    ``target`` is either a bare property name or a relocation path of tokens.
    ``deferred`` values are resolved lazily once layout is known.
    """

    value: Any
    target: str | tuple[str, ...]
    deferred: bool = False

    @property
    def is_style_prop(self) -> bool:
        return isinstance(self.target, str)

    def as_tuple(self) -> tuple:
        target = self.target if isinstance(self.target, str) else list(self.target)
        if self.deferred:
            return (self.value, target, True)
        return (self.value, target)


@dataclass(frozen=True)
class ExtractionWarning:
    """A non-fatal diagnostic raised while parsing a declaration value."""

    type: str
    property: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return f"{self.type}: {self.property}"
        return f"{self.type}: {self.property}: {self.value}"


@dataclass(frozen=True)
class ContainerValue:
    """Parsed value of ``container``, ``container-name`` or ``container-type``.

    ``names`` is None when the declaration does not name the container;
    ``none`` is True for the ``none`` keyword.
    """

    names: tuple[str, ...] | None = None
    none: bool = False
    type: str | None = None


@dataclass
class ContainerInfo:
    """Container declared by a rule.

    ``names`` is tri-state: None (unset), a list of names, or False once a
    ``none`` declaration has cleared it.
    """

    names: list[str] | bool | None = None
    type: str | None = None


@dataclass(frozen=True)
class ContainerQuery:
    """One enclosing ``@container`` (or group container) condition."""

    name: str | None = None
    condition: str | None = None
    pseudo_classes: frozenset[str] | None = None
    attrs: tuple[AttributeSelector, ...] | None = None


@dataclass(frozen=True)
class TransitionLayer:
    """One comma-separated layer of the ``transition`` shorthand."""

    property: str = "all"
    duration: Time = Time(0)
    delay: Time = Time(0)
    timing_function: EasingFunction = EasingFunction("ease")


@dataclass
class TransitionInfo:
    property: list[str] | None = None
    duration: list[Time] | None = None
    delay: list[Time] | None = None
    timing_function: list[EasingFunction] | None = None


@dataclass
class StyleRule:
    """A compiled declaration block bound to one selector match."""

    specificity: Specificity
    declarations: list[StyleDeclaration] = field(default_factory=list)
    variables: list[tuple[str, Any]] | None = None
    media: list[MediaQuery] | None = None
    container_query: list[ContainerQuery] | None = None
    pseudo_classes: frozenset[str] | None = None
    attrs: tuple[AttributeSelector, ...] | None = None
    animations: dict[str, list[Any]] | None = None
    transition: TransitionInfo | None = None
    container: ContainerInfo | None = None
    warnings: list[ExtractionWarning] | None = None
    requires_layout_width: bool = False
    requires_layout_height: bool = False

    @property
    def is_empty(self) -> bool:
        """True when the rule contributes nothing to the cascade."""
        return not (
            self.declarations
            or self.variables
            or self.container
            or self.animations
            or self.transition
        )


@dataclass(frozen=True)
class PartialRule:
    """Context inherited from enclosing ``@media`` and ``@container`` rules."""

    media: tuple[MediaQuery, ...] = ()
    container_query: tuple[ContainerQuery, ...] = ()

    def extend(
        self,
        media: tuple[MediaQuery, ...] = (),
        container_query: tuple[ContainerQuery, ...] = (),
    ) -> PartialRule:
        return PartialRule(
            media=self.media + tuple(media),
            container_query=self.container_query + tuple(container_query),
        )

    def apply_to(self, rule: StyleRule) -> StyleRule:
        """Merge this context into *rule*; list fields concatenate."""
        media = list(self.media) + list(rule.media or [])
        containers = list(self.container_query) + list(rule.container_query or [])
        return replace(
            rule,
            media=media or None,
            container_query=containers or None,
        )


@dataclass
class StyleRuleSet:
    """All compiled rules sharing one selector key, split by importance."""

    normal: list[StyleRule] | None = None
    important: list[StyleRule] | None = None
    warnings: list[ExtractionWarning] | None = None
    variables: bool = False
    container: bool = False
    animation: bool = False
    hover: bool = False
    active: bool = False
    focus: bool = False


@dataclass(frozen=True)
class AnimationFrame:
    value: Any
    progress: float


@dataclass
class ExtractedAnimation:
    """Frames of one ``@keyframes`` block.

    ``frames`` maps each animated property to its progress-sorted frames;
    ``easing_functions`` is indexed by keyframe step and is None when no step
    sets a custom easing.
    """

    frames: dict[str, list[AnimationFrame]] = field(default_factory=dict)
    easing_functions: list[EasingFunction] | None = None
    requires_layout_width: bool = False
    requires_layout_height: bool = False


@dataclass(frozen=True)
class CompiledStyles:
    """The compiled bundle handed to the style-resolution engine."""

    rules: list[tuple[str, StyleRuleSet]]
    keyframes: list[tuple[str, ExtractedAnimation]]
    root_variables: dict[str, dict[str, Any]]
    universal_variables: dict[str, dict[str, Any]]
    flags: dict[str, Any]
    rem: float | None = None
    compiled: bool = True

    def rule_set(self, key: str) -> StyleRuleSet | None:
        """Return the rule set compiled for *key*, if any."""
        for name, rule_set in self.rules:
            if name == key:
                return rule_set
        return None

    def animation(self, name: str) -> ExtractedAnimation | None:
        for key, animation in self.keyframes:
            if key == name:
                return animation
        return None
