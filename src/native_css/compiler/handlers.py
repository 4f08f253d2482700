"""Handler interface invoked by the declaration value parser."""

from __future__ import annotations

from typing import Any, Literal, Protocol

from native_css.model import ContainerValue, ExtractionWarning, RuntimeValue


class PropertyHandlers(Protocol):
    """One method per property category.

    The value parser calls one of these per declaration, synchronously and in
    declaration order. ``requires_layout`` may precede it.
    """

    def add_style_prop(
        self,
        name: str,
        value: RuntimeValue,
        relocation: tuple[str, ...] | None = None,
    ) -> None: ...

    def add_transform_prop(self, name: str, value: RuntimeValue) -> None: ...

    def handle_transform_shorthand(
        self, name: str, values: dict[str, RuntimeValue]
    ) -> None: ...

    def handle_style_shorthand(
        self, name: str, values: dict[str, RuntimeValue]
    ) -> None: ...

    def add_container_prop(self, property: str, value: ContainerValue) -> None: ...

    def add_transition_prop(self, property: str, value: Any) -> None: ...

    def add_animation_prop(self, property: str, value: Any) -> None: ...

    def requires_layout(self, axis: Literal["width", "height"]) -> None: ...

    def add_warning(self, warning: ExtractionWarning) -> None: ...
