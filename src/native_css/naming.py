"""Property-name conversion between CSS and native style conventions."""

from __future__ import annotations

import re

_DASH_RE = re.compile(r"-(.)")


def to_native_property(name: str) -> str:
    """Convert a CSS property name to camel case: ``margin-top`` -> ``marginTop``.

    Custom properties (``--name``) are returned unchanged.
    """
    if name.startswith("--"):
        return name
    return _DASH_RE.sub(lambda m: m.group(1).upper(), name)


def animation_field(name: str) -> str:
    """Map an ``animation-*`` property to its grouped field name.

    ``animation-timing-function`` -> ``timingFunction``
    """
    return to_native_property(name.replace("animation-", "", 1))
