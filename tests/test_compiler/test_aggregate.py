"""Tests for rule routing and rule-set assembly."""

from native_css.compiler import (
    CompilerOptions,
    add_declaration,
    build_rule_sets,
    compile_css,
)
from native_css.model import (
    ClassNameSelector,
    ContainerInfo,
    ContainerQuery,
    ExtractionWarning,
    Specificity,
    StyleDeclaration,
    StyleRule,
)
from native_css.parser.selectors import DARK_MEDIA


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rule(order: int = 1, important: int = 0, **fields) -> StyleRule:
    return StyleRule(specificity=Specificity(important=important, order=order), **fields)


def _color(value: str = "red") -> list[StyleDeclaration]:
    return [StyleDeclaration(value, "color")]


# ---------------------------------------------------------------------------
# add_declaration
# ---------------------------------------------------------------------------


class TestAddDeclaration:
    def test_appends_without_dedup(self):
        rules: dict = {}
        rule = _rule(declarations=_color())
        add_declaration(rules, "a", rule)
        add_declaration(rules, "a", rule)
        assert rules == {"a": [rule, rule]}


# ---------------------------------------------------------------------------
# build_rule_sets
# ---------------------------------------------------------------------------


class TestBuildRuleSets:
    def test_partitions_by_importance(self):
        normal = _rule(declarations=_color())
        important = _rule(important=1, declarations=_color("blue"))
        [(key, rule_set)] = build_rule_sets({"a": [normal, important]})
        assert key == "a"
        assert rule_set.normal == [normal]
        assert rule_set.important == [important]

    def test_empty_bucket_is_absent(self):
        [(_, rule_set)] = build_rule_sets({"a": [_rule(declarations=_color())]})
        assert rule_set.important is None

    def test_empty_rules_are_discarded(self):
        assert build_rule_sets({"a": [_rule()], "b": []}) == []

    def test_warnings_survive_empty_rules(self):
        warning = ExtractionWarning("IncompatibleNativeProperty", "cursor")
        [(_, rule_set)] = build_rule_sets({"a": [_rule(warnings=[warning])]})
        assert rule_set.normal is None
        assert rule_set.warnings == [warning]

    def test_warnings_are_moved_to_the_set(self):
        warning = ExtractionWarning("IncompatibleNativeValue", "display", "grid")
        [(_, rule_set)] = build_rule_sets(
            {"a": [_rule(declarations=_color(), warnings=[warning])]}
        )
        assert rule_set.warnings == [warning]
        assert rule_set.normal[0].warnings is None

    def test_flags(self):
        rules = {
            "a": [
                _rule(declarations=_color(), pseudo_classes=frozenset({"hover", "focus"})),
                _rule(variables=[("--x", 1)]),
                _rule(container=ContainerInfo(names=["card"])),
            ],
            "b": [_rule(animations={"name": ["spin"]})],
        }
        (_, a), (_, b) = build_rule_sets(rules)
        assert a.hover and a.focus and not a.active
        assert a.variables and a.container and not a.animation
        assert b.animation
        assert not b.hover

    def test_key_order_is_preserved(self):
        rules = {k: [_rule(declarations=_color())] for k in ("z", "a", "m")}
        assert [key for key, _ in build_rule_sets(rules)] == ["z", "a", "m"]


# ---------------------------------------------------------------------------
# Routing through the selector classifier
# ---------------------------------------------------------------------------


class TestRouting:
    def test_selector_list_routes_to_each_key(self):
        compiled = compile_css(".a, .b { color: red }")
        assert [key for key, _ in compiled.rules] == ["a", "b"]

    def test_unsupported_selectors_are_dropped(self):
        compiled = compile_css("div { color: red } #id { color: red } .a > .b { color: red }")
        assert compiled.rules == []

    def test_selector_specificity_is_added(self):
        rule = compile_css(".a[data-open].b { color: red }").rules
        assert rule == []
        rule = compile_css(".a[data-open]:focus { color: red }").rule_set("a").normal[0]
        assert rule.specificity == Specificity(class_name=3, order=1)
        assert rule.pseudo_classes == frozenset({"focus"})
        assert [str(a) for a in rule.attrs] == ["[data-open]"]

    def test_hover_flag(self):
        compiled = compile_css(".a:hover { color: red } .b:active { color: red }")
        assert compiled.rule_set("a").hover
        assert not compiled.rule_set("a").active
        assert compiled.rule_set("b").active

    def test_transition_sets_animation_flag(self):
        assert compile_css(".a { transition: opacity 1s }").rule_set("a").animation

    def test_custom_normalizer(self):
        def only_buttons(selector, rule, state):
            if selector == "button":
                yield ClassNameSelector("button", Specificity(class_name=1))

        compiled = compile_css(
            "button { color: red } .a { color: red }",
            CompilerOptions(selector_normalizer=only_buttons),
        )
        assert [key for key, _ in compiled.rules] == ["button"]


class TestWarnings:
    def test_warning_only_rule_set(self):
        rule_set = compile_css(".a { cursor: pointer }").rule_set("a")
        assert rule_set.normal is None
        assert rule_set.warnings == [ExtractionWarning("IncompatibleNativeProperty", "cursor")]

    def test_ignored_warnings(self):
        options = CompilerOptions(ignore_property_warning_patterns=("^cursor$",))
        assert compile_css(".a { cursor: pointer }", options).rules == []

    def test_ignore_patterns_leave_other_warnings(self):
        options = CompilerOptions(ignore_property_warning_patterns=("^cursor$",))
        rule_set = compile_css(".a { cursor: pointer; display: grid }", options).rule_set("a")
        assert rule_set.warnings == [
            ExtractionWarning("IncompatibleNativeValue", "display", "grid")
        ]


# ---------------------------------------------------------------------------
# Variables
# ---------------------------------------------------------------------------


class TestVariables:
    def test_root_variables(self):
        compiled = compile_css(":root { --brand: #ff0000; --size: 4px }")
        assert compiled.root_variables == {
            "--brand": {"default": "#ff0000"},
            "--size": {"default": 4},
        }
        assert compiled.rules == []

    def test_universal_variables(self):
        compiled = compile_css("* { --gap: 8px }")
        assert compiled.universal_variables == {"--gap": {"default": 8}}

    def test_dark_media_subtype(self):
        compiled = compile_css(
            ":root { --x: 1 } @media (prefers-color-scheme: dark) { :root { --x: 2 } }"
        )
        assert compiled.root_variables == {"--x": {"default": 1, "dark": 2}}

    def test_attribute_dark_mode_round_trip(self):
        compiled = compile_css(
            "@cssInterop set darkMode [data-theme=dark];"
            ":root { --x: 1 } :root[data-theme=dark] { --x: 2 }"
        )
        assert compiled.root_variables == {"--x": {"default": 1, "dark": 2}}

    def test_class_dark_mode_universal(self):
        compiled = compile_css(
            "@cssInterop set darkMode class dark; * { --x: 1 } .dark * { --x: 2 }"
        )
        assert compiled.universal_variables == {"--x": {"default": 1, "dark": 2}}

    def test_later_value_wins(self):
        compiled = compile_css(":root { --x: 1 } :root { --x: 3 }")
        assert compiled.root_variables == {"--x": {"default": 3}}

    def test_rem_from_root_font_size(self):
        compiled = compile_css(":root { font-size: 14px } :root { font-size: 16px }")
        assert compiled.rem == 16

    def test_rem_ignores_non_numeric(self):
        assert compile_css(":root { font-size: 1rem }").rem is None

    def test_class_variables_stay_on_rule(self):
        rule_set = compile_css(".a { --x: 1 }").rule_set("a")
        assert rule_set.variables
        assert rule_set.normal[0].variables == [("--x", 1)]


# ---------------------------------------------------------------------------
# Dark class / group containers
# ---------------------------------------------------------------------------


class TestAncestors:
    def test_dark_class_adds_media(self):
        compiled = compile_css(
            "@cssInterop set darkMode class dark; .dark .a { color: white }"
        )
        assert compiled.rule_set("a").normal[0].media == [DARK_MEDIA]

    def test_dark_class_ignored_in_media_mode(self):
        assert compile_css(".dark .a { color: white }").rules == []

    def test_group_container(self):
        compiled = compile_css(
            ".group:hover .child { color: red }",
            CompilerOptions(grouping=("^group",)),
        )
        group = compiled.rule_set("group")
        assert group.container
        assert group.normal[0].container == ContainerInfo(names=["group"])

        child = compiled.rule_set("child")
        rule = child.normal[0]
        assert rule.container_query == [
            ContainerQuery(name="group", pseudo_classes=frozenset({"hover"}))
        ]
        assert rule.specificity.class_name == 3
        assert not child.hover

    def test_group_rule_carries_child_attrs(self):
        compiled = compile_css(
            ".group .child[data-open] { color: red }",
            CompilerOptions(grouping=("^group$",)),
        )
        group_rule = compiled.rule_set("group").normal[0]
        assert [str(a) for a in group_rule.attrs] == ["[data-open]"]

    def test_group_requires_matching_pattern(self):
        assert compile_css(".group:hover .child { color: red }").rules == []

    def test_group_inside_container_query(self):
        compiled = compile_css(
            "@container card (min-width: 1px) { .group .child { color: red } }",
            CompilerOptions(grouping=("^group$",)),
        )
        frames = compiled.rule_set("child").normal[0].container_query
        assert [f.name for f in frames] == ["card", "group"]
