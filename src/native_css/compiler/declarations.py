"""Declaration compiler: turns a declaration list into one StyleRule."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Literal

from native_css.compiler.relocation import RelocationTable, resolve_relocation
from native_css.compiler.state import CompilerState
from native_css.model import (
    DEFAULT_CONTAINER_NAME,
    ContainerInfo,
    ContainerValue,
    Declaration,
    ExtractionWarning,
    RuntimeValue,
    Specificity,
    StyleBlock,
    StyleDeclaration,
    StyleRule,
    TransitionInfo,
    is_deferred,
)
from native_css.naming import animation_field, to_native_property

logger = logging.getLogger(__name__)

_TRANSITION_LONGHANDS = {
    "transition-property": "property",
    "transition-duration": "duration",
    "transition-delay": "delay",
    "transition-timing-function": "timing_function",
}


def _all_equal(values: list[Any]) -> bool:
    return all(value == values[0] for value in values[1:])


class DeclarationCompiler:
    """Compile a flat list of declarations into a single :class:`StyleRule`.

    The instance is the handler table handed to the value parser; every
    handler mutates ``self.rule``.
    """

    def __init__(
        self,
        state: CompilerState,
        specificity: Specificity,
        relocations: RelocationTable | None = None,
    ) -> None:
        self.state = state
        self.relocations = relocations or {}
        self.rule = StyleRule(specificity=specificity)

    def compile(self, declarations: Iterable[Declaration]) -> StyleRule:
        parse = self.state.declaration_parser
        for declaration in declarations:
            parse(declaration, self)
        return self.rule

    # --- style props ----------------------------------------------------------

    def add_style_prop(
        self,
        name: str,
        value: RuntimeValue,
        relocation: tuple[str, ...] | None = None,
    ) -> None:
        if value is None:
            return
        if name.startswith("--"):
            self._add_variable(name, value)
            return

        name = to_native_property(name)
        path = resolve_relocation(self.relocations, name, relocation)
        target: str | tuple[str, ...] = name if path is None else path
        self.rule.declarations.append(
            StyleDeclaration(value=value, target=target, deferred=is_deferred(value))
        )

    def add_transform_prop(self, name: str, value: RuntimeValue) -> None:
        self.add_style_prop(name, value)

    def handle_transform_shorthand(
        self, name: str, values: dict[str, RuntimeValue]
    ) -> None:
        items = list(values.values())
        if not items:
            return
        if _all_equal(items):
            self.add_style_prop(name, items[0], ("transform", name))
            return
        for sub, value in values.items():
            self.add_style_prop(sub, value, ("transform", sub))

    def handle_style_shorthand(
        self, name: str, values: dict[str, RuntimeValue]
    ) -> None:
        items = list(values.values())
        if not items:
            return
        if _all_equal(items):
            self.add_style_prop(name, items[0])
            return
        for sub, value in values.items():
            self.add_style_prop(sub, value)

    def _add_variable(self, name: str, value: RuntimeValue) -> None:
        if self.rule.variables is None:
            self.rule.variables = []
        self.rule.variables.append((name, value))

    # --- containers -----------------------------------------------------------

    def add_container_prop(self, property: str, value: ContainerValue) -> None:
        names: list[str] | bool
        if property == "container-type" or (value.names is None and not value.none):
            names = [DEFAULT_CONTAINER_NAME]
        elif value.none:
            names = False
        else:
            names = list(value.names or ())

        container = self.rule.container
        if container is None:
            container = self.rule.container = ContainerInfo()

        if names is False or container.names is False:
            # A cleared name list stays cleared for the rest of the block.
            container.names = False
        elif isinstance(container.names, list):
            container.names = list(dict.fromkeys([*container.names, *names]))
        else:
            container.names = names

        if value.type:
            container.type = value.type

    # --- transitions ----------------------------------------------------------

    def add_transition_prop(self, property: str, value: Any) -> None:
        transition = self.rule.transition
        if transition is None:
            transition = self.rule.transition = TransitionInfo()

        if property == "transition-property":
            transition.property = [to_native_property(p) for p in value]
            return
        if property in _TRANSITION_LONGHANDS:
            setattr(transition, _TRANSITION_LONGHANDS[property], list(value))
            return
        if property != "transition":
            logger.debug("Ignoring unknown transition property %r", property)
            return

        # The shorthand never overrides a longhand set earlier in the block.
        if transition.property is None:
            transition.property = [to_native_property(layer.property) for layer in value]
        if transition.duration is None:
            transition.duration = [layer.duration for layer in value]
        if transition.delay is None:
            transition.delay = [layer.delay for layer in value]
        if transition.timing_function is None:
            transition.timing_function = [layer.timing_function for layer in value]

    # --- animations -----------------------------------------------------------

    def add_animation_prop(self, property: str, value: Any) -> None:
        if self.rule.animations is None:
            self.rule.animations = {}
        animations = self.rule.animations

        if property != "animation":
            animations[animation_field(property)] = value
            return

        grouped: dict[str, list[Any]] = {}
        for layer in value:
            for key, field_value in layer.items():
                grouped.setdefault(key, []).append(field_value)
        for key, field_values in grouped.items():
            animations.setdefault(animation_field(key), field_values)

    # --- layout / diagnostics -------------------------------------------------

    def requires_layout(self, axis: Literal["width", "height"]) -> None:
        if axis == "width":
            self.rule.requires_layout_width = True
        else:
            self.rule.requires_layout_height = True

    def add_warning(self, warning: ExtractionWarning) -> None:
        if self.state.ignores_warning(warning.property):
            logger.debug("Suppressed warning %s", warning)
            return
        if self.rule.warnings is None:
            self.rule.warnings = []
        self.rule.warnings.append(warning)


def compile_style_block(
    block: StyleBlock,
    state: CompilerState,
    relocations: RelocationTable | None = None,
) -> list[StyleRule]:
    """Compile a block's normal and ``!important`` declarations separately."""
    rules: list[StyleRule] = []
    base = Specificity(order=state.appearance_order)

    if block.declarations:
        compiler = DeclarationCompiler(state, base, relocations)
        rules.append(compiler.compile(block.declarations))

    if block.important_declarations:
        compiler = DeclarationCompiler(state, Specificity(important=1, order=base.order), relocations)
        rules.append(compiler.compile(block.important_declarations))

    return rules
