"""Tests for the keyframe builder."""

import pytest

from native_css.compiler import (
    AnimationValueError,
    CompilerOptions,
    CompilerState,
    compile_css,
    compile_rules,
    extract_keyframes,
    keyframe_progress,
)
from native_css.model import (
    INHERIT,
    PLACEHOLDER_EASING,
    AnimationFrame,
    Declaration,
    EasingFunction,
    Keyframe,
    KeyframeSelector,
    KeyframesRule,
    RuntimeFunction,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _animation(source: str, name: str):
    animation = compile_css(source).animation(name)
    assert animation is not None
    return animation


def _frames(frames):
    return [(f.value, f.progress) for f in frames]


# ---------------------------------------------------------------------------
# Selector progress
# ---------------------------------------------------------------------------


class TestKeyframeProgress:
    def test_from_and_to(self):
        assert keyframe_progress(KeyframeSelector("from")) == 0
        assert keyframe_progress(KeyframeSelector("to")) == 1

    def test_percentage(self):
        assert keyframe_progress(KeyframeSelector("percentage", 0.25)) == 0.25

    def test_timeline_range_unsupported(self):
        assert keyframe_progress(KeyframeSelector("timeline-range-percentage", 0.1)) is None


# ---------------------------------------------------------------------------
# Frame assembly
# ---------------------------------------------------------------------------


class TestFrames:
    def test_from_to(self):
        animation = _animation("@keyframes fade { from { opacity: 0 } to { opacity: 1 } }", "fade")
        assert _frames(animation.frames["opacity"]) == [(0, 0), (1, 1)]
        assert animation.easing_functions is None

    def test_missing_start_gets_inherit_frame(self):
        animation = _animation("@keyframes grow { 50% { opacity: 0.5 } to { opacity: 1 } }", "grow")
        assert _frames(animation.frames["opacity"]) == [
            (INHERIT, 0),
            (0.5, 0.5),
            (1, 0.5),
        ]

    def test_frames_are_sorted_by_progress(self):
        animation = _animation(
            "@keyframes k { to { opacity: 1 } from { opacity: 0 } 50% { opacity: 0.2 } }", "k"
        )
        assert [f.value for f in animation.frames["opacity"]] == [0, 0.2, 1]

    def test_progress_is_measured_across_all_properties(self):
        animation = _animation(
            """
            @keyframes mixed {
                from { opacity: 0 }
                25% { width: 10px }
                to { opacity: 1; width: 20px }
            }
            """,
            "mixed",
        )
        assert _frames(animation.frames["opacity"]) == [(0, 0), (1, 0.75)]
        assert _frames(animation.frames["width"]) == [(INHERIT, 0), (10, 0.25), (20, 0.75)]

    def test_every_property_starts_at_zero(self):
        animation = _animation(
            "@keyframes k { 30% { opacity: 0 } 60% { width: 5px } to { height: 1px } }", "k"
        )
        for frames in animation.frames.values():
            assert frames[0].progress == 0

    def test_equal_progress_keeps_source_order(self):
        animation = _animation(
            "@keyframes k { 50% { opacity: 1 } 50% { opacity: 0.5 } }", "k"
        )
        assert [f.value for f in animation.frames["opacity"]] == [INHERIT, 1, 0.5]

    def test_equal_progress_measures_from_previous_distinct_position(self):
        animation = _animation(
            "@keyframes k { 50% { opacity: 1 } 50% { width: 1px } to { opacity: 0 } }", "k"
        )
        assert list(animation.frames) == ["opacity", "width"]
        assert _frames(animation.frames["opacity"]) == [(INHERIT, 0), (1, 0.5), (0, 0.5)]
        assert _frames(animation.frames["width"]) == [(INHERIT, 0), (1, 0.5)]

    def test_percentage_translate_requires_layout(self):
        animation = _animation(
            "@keyframes slide { to { translate: 50% 10%; opacity: 1 } }", "slide"
        )
        assert animation.requires_layout_width
        assert animation.requires_layout_height
        assert list(animation.frames) == ["opacity"]

    def test_shared_selector_list(self):
        animation = _animation("@keyframes k { from, to { opacity: 0 } 50% { opacity: 1 } }", "k")
        assert _frames(animation.frames["opacity"]) == [(0, 0), (1, 0.5), (0, 0.5)]

    def test_relocated_declarations_are_dropped(self):
        animation = _animation("@keyframes k { to { translate: 10px 20px; opacity: 1 } }", "k")
        assert list(animation.frames) == ["opacity"]

    def test_empty_frames_skipped(self):
        animation = _animation("@keyframes k { from { } to { opacity: 1 } }", "k")
        assert _frames(animation.frames["opacity"]) == [(INHERIT, 0), (1, 1)]

    def test_transform_functions_are_animatable(self):
        animation = _animation("@keyframes spin { to { transform: rotate(360deg) } }", "spin")
        assert animation.frames["transform"][-1] == AnimationFrame(
            [RuntimeFunction("rotate", ("360deg",))], 1
        )

    def test_later_block_with_same_name_overwrites(self):
        compiled = compile_css(
            "@keyframes k { to { opacity: 1 } } @keyframes k { to { width: 1px } }"
        )
        assert len(compiled.keyframes) == 1
        assert list(compiled.animation("k").frames) == ["width"]


# ---------------------------------------------------------------------------
# Easing
# ---------------------------------------------------------------------------


class TestEasing:
    def test_easing_per_step(self):
        animation = _animation(
            """
            @keyframes k {
                from { opacity: 0; animation-timing-function: ease-in }
                to { opacity: 1 }
            }
            """,
            "k",
        )
        assert animation.easing_functions == [EasingFunction("ease-in")]

    def test_holes_filled_with_placeholder(self):
        animation = _animation(
            """
            @keyframes k {
                from { opacity: 0 }
                50% { opacity: 0.5 }
                to { opacity: 1; animation-timing-function: ease-out }
            }
            """,
            "k",
        )
        assert animation.easing_functions == [
            PLACEHOLDER_EASING,
            PLACEHOLDER_EASING,
            EasingFunction("ease-out"),
        ]


# ---------------------------------------------------------------------------
# Errors and unsupported input
# ---------------------------------------------------------------------------


def _rule(*frames: Keyframe) -> KeyframesRule:
    return KeyframesRule(name="k", keyframes=frames)


class TestErrors:
    def test_structured_value_is_fatal(self):
        def parser(declaration, handlers):
            handlers.add_style_prop(declaration.property, {"offsetX": 1})

        rule = _rule(Keyframe((KeyframeSelector("to"),), (Declaration("box-shadow", "x"),)))
        with pytest.raises(AnimationValueError) as info:
            compile_rules([rule], CompilerOptions(declaration_parser=parser))
        assert info.value.property == "boxShadow"
        assert info.value.keyframes == "k"

    def test_timeline_range_selector_ignored(self):
        rule = _rule(
            Keyframe(
                (KeyframeSelector("timeline-range-percentage", 0.1),),
                (Declaration("opacity", "1"),),
            )
        )
        state = CompilerState.from_options(CompilerOptions())
        assert extract_keyframes(rule, state).frames == {}

    def test_requires_layout_is_recorded_on_animation(self):
        def parser(declaration, handlers):
            handlers.requires_layout("height")

        rule = _rule(Keyframe((KeyframeSelector("to"),), (Declaration("x", "1"),)))
        state = CompilerState.from_options(CompilerOptions(declaration_parser=parser))
        animation = extract_keyframes(rule, state)
        assert animation.requires_layout_height
        assert not animation.requires_layout_width
