"""Runtime-value descriptors handed to the compiler by the value parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

# Frame value injected when a property's first keyframe is not at progress 0.
INHERIT = "!INHERIT!"


@dataclass(frozen=True)
class RuntimeFunction:
    """A value the host must evaluate at draw time, e.g. ``rem(1.5)``.

    ``delay`` marks values that can only be resolved once layout is known.
    """

    name: str
    args: tuple[Any, ...] = ()
    delay: bool = False


@dataclass(frozen=True)
class Time:
    value: float
    unit: str = "s"

    def __str__(self) -> str:
        value = int(self.value) if float(self.value).is_integer() else self.value
        return f"{value}{self.unit}"


@dataclass(frozen=True)
class EasingFunction:
    """A timing function such as ``ease-in`` or ``cubic-bezier(...)``."""

    type: str
    args: tuple[Any, ...] = ()


PLACEHOLDER_EASING = EasingFunction(type="!PLACEHOLDER!")

RuntimeValue = Union[str, int, float, bool, None, RuntimeFunction, list, tuple]


def is_runtime_descriptor(value: Any) -> bool:
    """Return True if *value* is a primitive descriptor that can be animated.

    Primitives are scalars, runtime functions, and sequences of primitives.
    Mappings and any other objects are structured values.
    """
    if value is None or isinstance(value, (str, int, float, bool, RuntimeFunction)):
        return True
    if isinstance(value, (list, tuple)):
        return all(is_runtime_descriptor(item) for item in value)
    return False


def is_deferred(value: Any) -> bool:
    """Return True if *value* must wait for layout before it is resolved."""
    return isinstance(value, RuntimeFunction) and value.delay
