"""
Corner selection for rounded rectangles.

``Corner`` is a flag enum: individual corners combine with ``|`` into any
subset, and membership is a single bit test.
"""
from __future__ import annotations

import enum
import re


class Corner(enum.Flag):
    """The four rectangle corners and their unions."""

    NONE = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 8
    ALL = TOP_LEFT | TOP_RIGHT | BOTTOM_LEFT | BOTTOM_RIGHT


_SPLIT_RE = re.compile(r"[\s,|+]+")
_CAMEL_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")

_ALIASES: dict[str, Corner] = {
    "none": Corner.NONE,
    "all": Corner.ALL,
    "top_left": Corner.TOP_LEFT,
    "top_right": Corner.TOP_RIGHT,
    "bottom_left": Corner.BOTTOM_LEFT,
    "bottom_right": Corner.BOTTOM_RIGHT,
}


def parse_corners(text: str | Corner) -> Corner:
    """Parse a corner list such as ``"top-left, bottom-right"`` into a ``Corner``.

    Names may be written kebab-, snake- or camel-case and separated by commas,
    whitespace, ``|`` or ``+``.  ``all`` and ``none`` are accepted.  An empty
    string means no corners.
    """
    if isinstance(text, Corner):
        return text

    result = Corner.NONE
    for token in _SPLIT_RE.split(text.strip()):
        if not token:
            continue
        key = _CAMEL_RE.sub("_", token).replace("-", "_").lower()
        if key not in _ALIASES:
            allowed = ", ".join(sorted(_ALIASES))
            raise ValueError(f"Unknown corner: {token!r}. Supported: {allowed}")
        result |= _ALIASES[key]
    return result


def format_corners(corners: Corner) -> str:
    """Return the kebab-case names of *corners* in clockwise order from top-left."""
    if corners == Corner.ALL:
        return "all"
    names = [
        name.replace("_", "-").lower()
        for name, member in (
            ("TOP_LEFT", Corner.TOP_LEFT),
            ("TOP_RIGHT", Corner.TOP_RIGHT),
            ("BOTTOM_RIGHT", Corner.BOTTOM_RIGHT),
            ("BOTTOM_LEFT", Corner.BOTTOM_LEFT),
        )
        if member in corners
    ]
    return ", ".join(names) or "none"
