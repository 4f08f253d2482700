"""Tagged selector variants yielded by the selector classifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from native_css.model.ast import MediaQuery
from native_css.model.specificity import Specificity


@dataclass(frozen=True)
class AttributeSelector:
    """An attribute condition such as ``[data-state=open]``."""

    name: str
    operator: str | None = None
    value: str | None = None

    def __str__(self) -> str:
        if self.operator is None:
            return f"[{self.name}]"
        return f"[{self.name}{self.operator}{self.value}]"


@dataclass(frozen=True)
class ClassNameSelector:
    type: ClassVar[str] = "className"

    class_name: str
    specificity: Specificity = field(default_factory=Specificity)
    pseudo_classes: frozenset[str] | None = None
    attrs: tuple[AttributeSelector, ...] | None = None
    group_class_name: str | None = None
    group_pseudo_classes: frozenset[str] | None = None
    group_attrs: tuple[AttributeSelector, ...] | None = None
    media: tuple[MediaQuery, ...] | None = None


@dataclass(frozen=True)
class RootVariableSelector:
    """``:root`` scoped custom properties."""

    type: ClassVar[str] = "rootVariables"

    subtype: str = "default"


@dataclass(frozen=True)
class UniversalVariableSelector:
    """``*`` scoped custom properties."""

    type: ClassVar[str] = "universalVariables"

    subtype: str = "default"


SelectorVariant = Union[ClassNameSelector, RootVariableSelector, UniversalVariableSelector]
