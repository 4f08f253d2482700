"""Specificity model: a fixed-width cascade vector compared tier by tier."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True, order=True)
class Specificity:
    """Ranks compiled rules that target the same element.

    Fields are declared highest-priority tier first, so the generated
    ordering methods compare lexicographically in cascade order:

        important        1 for ``!important`` blocks, 2 for keyframe frames
        inline           inline styles applied by the host
        pseudo_elements  pseudo-element weight
        class_name       classes, pseudo-classes and attribute selectors
        order            appearance order of the style block in the source
    """

    important: int = 0
    inline: int = 0
    pseudo_elements: int = 0
    class_name: int = 0
    order: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"Specificity tier {f.name!r} must be non-negative")

    def __add__(self, other: Specificity) -> Specificity:
        if not isinstance(other, Specificity):
            return NotImplemented
        return Specificity(
            *(getattr(self, f.name) + getattr(other, f.name) for f in fields(self))
        )

    @property
    def is_important(self) -> bool:
        return self.important > 0

    def as_list(self) -> list[int]:
        return [getattr(self, f.name) for f in fields(self)]


# Keyframe frames outrank ``!important`` declarations.
ANIMATION_IMPORTANCE = 2
