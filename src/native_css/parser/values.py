"""Declaration value parser: raw CSS values to runtime-value descriptors.

:func:`parse_declaration` calls exactly one :class:`PropertyHandlers` method
per declaration, preceded by ``requires_layout`` when a value depends on the
element's measured size.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

import tinycss2
from tinycss2 import ast as css

from native_css.model import (
    ContainerValue,
    Declaration,
    EasingFunction,
    ExtractionWarning,
    RuntimeFunction,
    RuntimeValue,
    Time,
    TransitionLayer,
)

if TYPE_CHECKING:
    from native_css.compiler.handlers import PropertyHandlers

logger = logging.getLogger(__name__)

_RUNTIME_UNITS = {"rem", "vw", "vh", "vmin", "vmax"}
_EASINGS = {"linear", "ease", "ease-in", "ease-out", "ease-in-out", "step-start", "step-end"}
_EASING_FUNCTIONS = {"cubic-bezier", "steps", "linear"}
_DIRECTIONS = {"normal", "reverse", "alternate", "alternate-reverse"}
_FILL_MODES = {"none", "forwards", "backwards", "both"}
_PLAY_STATES = {"running", "paused"}
_DISPLAY_VALUES = {"flex", "none", "contents"}

# Properties a native renderer has no equivalent for.
UNSUPPORTED_PROPERTIES = frozenset(
    {
        "cursor",
        "user-select",
        "float",
        "clear",
        "list-style",
        "list-style-type",
        "white-space",
        "word-break",
        "vertical-align",
        "resize",
        "outline",
        "outline-style",
        "outline-width",
        "outline-color",
        "outline-offset",
    }
)

_BOX_SHORTHANDS = {
    "margin": ("margin-top", "margin-right", "margin-bottom", "margin-left"),
    "padding": ("padding-top", "padding-right", "padding-bottom", "padding-left"),
    "inset": ("top", "right", "bottom", "left"),
    "border-width": (
        "border-top-width",
        "border-right-width",
        "border-bottom-width",
        "border-left-width",
    ),
}


# --- tokens -------------------------------------------------------------------


def _tokens(value: str) -> list[css.Node]:
    return tinycss2.parse_component_value_list(value, skip_comments=True)


def _significant(tokens: list[css.Node]) -> list[css.Node]:
    return [t for t in tokens if t.type not in ("whitespace", "comment")]


def _layers(tokens: list[css.Node]) -> list[list[css.Node]]:
    """Split on top-level commas, dropping whitespace."""
    layers: list[list[css.Node]] = [[]]
    for token in tokens:
        if token.type == "literal" and token.value == ",":
            layers.append([])
        elif token.type not in ("whitespace", "comment"):
            layers[-1].append(token)
    return [layer for layer in layers if layer]


def _number(token: css.Node) -> int | float:
    return token.int_value if token.is_integer else token.value


def token_value(token: css.Node) -> RuntimeValue:
    """Convert a single component value to a runtime-value descriptor."""
    if token.type == "number":
        return _number(token)
    if token.type == "dimension":
        unit = token.lower_unit
        if unit == "px":
            return _number(token)
        if unit in _RUNTIME_UNITS:
            return RuntimeFunction(unit, (_number(token),))
        if unit == "em":
            return RuntimeFunction("em", (_number(token),), delay=True)
        return tinycss2.serialize([token])
    if token.type in ("ident", "string"):
        return token.value
    if token.type == "hash":
        return f"#{token.value}"
    if token.type == "function" and token.lower_name == "var":
        args = _layers(token.arguments)
        if not args:
            return tinycss2.serialize([token])
        name = tinycss2.serialize(args[0]).strip()
        if len(args) > 1:
            return RuntimeFunction("var", (name, parse_value(args[1])))
        return RuntimeFunction("var", (name,))
    return tinycss2.serialize([token]).strip()


def parse_value(tokens: list[css.Node]) -> RuntimeValue:
    """Convert a whole declaration value; multi-token values stay serialized."""
    significant = _significant(tokens)
    if not significant:
        return None
    if len(significant) == 1:
        return token_value(significant[0])
    return tinycss2.serialize(tokens).strip()


def _time(token: css.Node) -> Time | None:
    if token.type == "dimension" and token.lower_unit in ("s", "ms"):
        return Time(_number(token), token.lower_unit)
    if token.type == "number" and token.value == 0:
        return Time(0)
    return None


def _easing(token: css.Node) -> EasingFunction | None:
    if token.type == "ident" and token.lower_value in _EASINGS:
        return EasingFunction(token.lower_value)
    if token.type == "function" and token.lower_name in _EASING_FUNCTIONS:
        args = tuple(token_value(t) for t in _significant(token.arguments) if t.type != "literal")
        return EasingFunction(token.lower_name, args)
    return None


# --- property handlers --------------------------------------------------------

_Handler = Callable[[str, list[css.Node], "PropertyHandlers"], None]


def _invalid(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    handlers.add_warning(
        ExtractionWarning("IncompatibleNativeValue", name, tinycss2.serialize(tokens).strip())
    )


def _box(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    values = [token_value(t) for t in _significant(tokens)]
    if not 1 <= len(values) <= 4:
        _invalid(name, tokens, handlers)
        return
    if len(values) == 1:
        values = values * 4
    elif len(values) == 2:
        values = values * 2
    elif len(values) == 3:
        values = [*values, values[1]]
    handlers.handle_style_shorthand(name, dict(zip(_BOX_SHORTHANDS[name], values)))


def _gap(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    values = [token_value(t) for t in _significant(tokens)]
    if not 1 <= len(values) <= 2:
        _invalid(name, tokens, handlers)
        return
    row, column = values[0], values[-1]
    handlers.handle_style_shorthand(name, {"row-gap": row, "column-gap": column})


def _scale(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    values = [token_value(t) for t in _significant(tokens)]
    if not 1 <= len(values) <= 2:
        _invalid(name, tokens, handlers)
        return
    handlers.handle_transform_shorthand(name, {"scaleX": values[0], "scaleY": values[-1]})


def _translate(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    significant = _significant(tokens)
    values = [token_value(t) for t in significant]
    if not 1 <= len(values) <= 2:
        _invalid(name, tokens, handlers)
        return
    y = values[1] if len(values) == 2 else 0
    # Percentages resolve against the element's own size
    for token, axis in zip(significant, ("width", "height")):
        if token.type == "percentage":
            handlers.requires_layout(axis)
    handlers.handle_transform_shorthand(name, {"translateX": values[0], "translateY": y})


def _rotate(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    handlers.add_transform_prop(name, parse_value(tokens))


def _transform(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    functions = []
    for token in _significant(tokens):
        if token.type != "function":
            if _is_none(token):
                continue
            _invalid(name, tokens, handlers)
            return
        args = tuple(parse_value(arg) for arg in _layers(token.arguments))
        functions.append(RuntimeFunction(token.name, args))
    handlers.add_style_prop(name, functions)


def _is_none(token: css.Node) -> bool:
    return token.type == "ident" and token.lower_value == "none"


def _container(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    significant = _significant(tokens)
    if name == "container-type":
        handlers.add_container_prop(name, ContainerValue(type=parse_value(tokens)))
        return

    names: list[str] = []
    container_type = None
    after_slash = False
    for token in significant:
        if token.type == "literal" and token.value == "/":
            after_slash = True
        elif token.type == "ident" and after_slash:
            container_type = token.lower_value
        elif token.type == "ident":
            names.append(token.value)

    if names == ["none"]:
        value = ContainerValue(none=True, type=container_type)
    else:
        value = ContainerValue(names=tuple(names) or None, type=container_type)
    handlers.add_container_prop(name, value)


def _transition_layer(tokens: list[css.Node]) -> TransitionLayer:
    fields: dict[str, Any] = {}
    times: list[Time] = []
    for token in tokens:
        time = _time(token)
        easing = _easing(token)
        if time is not None:
            times.append(time)
        elif easing is not None:
            fields["timing_function"] = easing
        elif token.type == "ident":
            fields["property"] = token.value
    if times:
        fields["duration"] = times[0]
    if len(times) > 1:
        fields["delay"] = times[1]
    return TransitionLayer(**fields)


def _transition(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    layers = _layers(tokens)
    if name == "transition":
        value: list[Any] = [_transition_layer(layer) for layer in layers]
    elif name == "transition-property":
        value = [tinycss2.serialize(layer).strip() for layer in layers]
    elif name == "transition-timing-function":
        value = [_easing(layer[0]) or EasingFunction("ease") for layer in layers]
    else:
        value = [_time(layer[0]) or Time(0) for layer in layers]
    handlers.add_transition_prop(name, value)


def _animation_layer(tokens: list[css.Node]) -> dict[str, Any]:
    layer: dict[str, Any] = {
        "animation-name": "none",
        "animation-duration": Time(0),
        "animation-timing-function": EasingFunction("ease"),
        "animation-delay": Time(0),
        "animation-iteration-count": 1,
        "animation-direction": "normal",
        "animation-fill-mode": "none",
        "animation-play-state": "running",
    }
    times = 0
    for token in tokens:
        time = _time(token)
        easing = _easing(token)
        keyword = token.lower_value if token.type == "ident" else None
        if time is not None:
            layer["animation-duration" if times == 0 else "animation-delay"] = time
            times += 1
        elif easing is not None:
            layer["animation-timing-function"] = easing
        elif token.type == "number" or keyword == "infinite":
            layer["animation-iteration-count"] = keyword or _number(token)
        elif keyword in _DIRECTIONS:
            layer["animation-direction"] = keyword
        elif keyword in _FILL_MODES and keyword != "none":
            layer["animation-fill-mode"] = keyword
        elif keyword in _PLAY_STATES:
            layer["animation-play-state"] = keyword
        elif token.type in ("ident", "string"):
            layer["animation-name"] = token.value
    return layer


def _animation(name: str, tokens: list[css.Node], handlers: PropertyHandlers) -> None:
    layers = _layers(tokens)
    if name == "animation":
        value: list[Any] = [_animation_layer(layer) for layer in layers]
    elif name in ("animation-duration", "animation-delay"):
        value = [_time(layer[0]) or Time(0) for layer in layers]
    elif name == "animation-timing-function":
        value = [_easing(layer[0]) or EasingFunction("ease") for layer in layers]
    elif name == "animation-iteration-count":
        value = [
            _number(layer[0]) if layer[0].type == "number" else tinycss2.serialize(layer).strip()
            for layer in layers
        ]
    else:
        value = [parse_value(layer) for layer in layers]
    handlers.add_animation_prop(name, value)


_HANDLERS: dict[str, _Handler] = {
    **{name: _box for name in _BOX_SHORTHANDS},
    "gap": _gap,
    "scale": _scale,
    "translate": _translate,
    "rotate": _rotate,
    "transform": _transform,
    "container": _container,
    "container-name": _container,
    "container-type": _container,
    "transition": _transition,
    "transition-property": _transition,
    "transition-duration": _transition,
    "transition-delay": _transition,
    "transition-timing-function": _transition,
    "animation": _animation,
    "animation-name": _animation,
    "animation-duration": _animation,
    "animation-timing-function": _animation,
    "animation-delay": _animation,
    "animation-iteration-count": _animation,
    "animation-direction": _animation,
    "animation-fill-mode": _animation,
    "animation-play-state": _animation,
}


def parse_declaration(declaration: Declaration, handlers: PropertyHandlers) -> None:
    """Parse *declaration* and report it through one value handler."""
    name = declaration.property
    tokens = _tokens(declaration.value)

    if name.startswith("--"):
        value = parse_value(tokens)
        handlers.add_style_prop(name, value if value is not None else declaration.value)
        return

    if name in UNSUPPORTED_PROPERTIES:
        handlers.add_warning(ExtractionWarning("IncompatibleNativeProperty", name))
        return

    if name == "display":
        value = parse_value(tokens)
        if value not in _DISPLAY_VALUES:
            handlers.add_warning(ExtractionWarning("IncompatibleNativeValue", name, str(value)))
            return
        handlers.add_style_prop(name, value)
        return

    handler = _HANDLERS.get(name)
    if handler is not None:
        handler(name, tokens, handlers)
        return

    handlers.add_style_prop(name, parse_value(tokens))
