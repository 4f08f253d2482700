"""Keyframe builder: turns an ``@keyframes`` block into per-property frames."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, cast

from native_css.compiler.declarations import DeclarationCompiler
from native_css.compiler.errors import AnimationValueError
from native_css.compiler.state import CompilerState
from native_css.model import (
    ANIMATION_IMPORTANCE,
    INHERIT,
    PLACEHOLDER_EASING,
    AnimationFrame,
    EasingFunction,
    ExtractedAnimation,
    KeyframeSelector,
    KeyframesRule,
    Specificity,
    StyleDeclaration,
    is_runtime_descriptor,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _RawFrame:
    progress: float
    values: tuple[StyleDeclaration, ...]
    easing: EasingFunction | None = None


class _KeyframeCompiler(DeclarationCompiler):
    """Routes layout requirements to the animation instead of the rule."""

    def __init__(
        self,
        state: CompilerState,
        specificity: Specificity,
        animation: ExtractedAnimation,
    ) -> None:
        super().__init__(state, specificity)
        self.animation = animation

    def requires_layout(self, axis: Literal["width", "height"]) -> None:
        if axis == "width":
            self.animation.requires_layout_width = True
        else:
            self.animation.requires_layout_height = True


def keyframe_progress(selector: KeyframeSelector) -> float | None:
    """Map a keyframe selector to a progress in [0, 1], or None if unsupported."""
    if selector.type == "from":
        return 0.0
    if selector.type == "to":
        return 1.0
    if selector.type == "percentage" and selector.value is not None:
        return selector.value
    logger.debug("Unsupported keyframe selector %r", selector.type)
    return None


def extract_keyframes(rule: KeyframesRule, state: CompilerState) -> ExtractedAnimation:
    """Compile *rule* into an :class:`ExtractedAnimation`.

    Each property's frames are ``(value, progress)`` pairs where progress is
    the distance from the previous distinct keyframe position in the whole
    sorted sequence. Every property starts at progress 0, with an
    :data:`INHERIT` frame injected when the first authored frame is later.

    Raises:
        AnimationValueError: if a frame value is a structured object.
    """
    animation = ExtractedAnimation()
    raw_frames: list[_RawFrame] = []

    for frame in rule.keyframes:
        if not frame.declarations:
            continue

        specificity = Specificity(
            important=ANIMATION_IMPORTANCE,
            class_name=1,
            order=state.appearance_order,
        )
        style = _KeyframeCompiler(state, specificity, animation).compile(
            frame.declarations
        )

        # Only direct style props can be animated
        values = tuple(d for d in style.declarations if d.is_style_prop)
        if not values:
            continue

        timing = (style.animations or {}).get("timingFunction")
        easing = timing[0] if timing else None

        for selector in frame.selectors:
            progress = keyframe_progress(selector)
            if progress is None:
                continue
            raw_frames.append(_RawFrame(progress, values, easing))

    # sort() is stable, so equal progress keeps source order
    raw_frames.sort(key=lambda f: f.progress)

    easing_functions: dict[int, EasingFunction] = {}
    previous = current = 0.0

    for index, raw in enumerate(raw_frames):
        if raw.progress != current:
            previous, current = current, raw.progress
        progress = raw.progress - previous

        if raw.easing is not None:
            easing_functions[index] = raw.easing

        for declaration in raw.values:
            key = cast(str, declaration.target)
            if not is_runtime_descriptor(declaration.value):
                raise AnimationValueError(rule.name, key, declaration.value)

            frames = animation.frames.setdefault(key, [])
            if not frames and raw.progress != 0:
                frames.append(AnimationFrame(value=INHERIT, progress=0))
            frames.append(AnimationFrame(value=declaration.value, progress=progress))

    if easing_functions:
        animation.easing_functions = [
            easing_functions.get(i, PLACEHOLDER_EASING)
            for i in range(max(easing_functions) + 1)
        ]

    logger.debug(
        "Keyframes %r: %d frame(s), %d propert(ies)",
        rule.name,
        len(raw_frames),
        len(animation.frames),
    )
    return animation
