"""Terminal font descriptor.

Fonts are stored as a single human readable string in the Pango layout
``[FAMILY-LIST] [STYLE-OPTIONS] [SIZE]``, e.g. ``Monospace, 12`` or
``DejaVu Sans Mono Bold Italic 10``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


_SIZE_RE = re.compile(r"^(?P<size>[0-9]+(?:\.[0-9]+)?)(?P<px>px)?$")

# Lowercased style, weight, variant and stretch words Pango accepts.
STYLE_WORDS = frozenset(
    {
        "normal",
        "roman",
        "oblique",
        "italic",
        "small-caps",
        "all-small-caps",
        "petite-caps",
        "all-petite-caps",
        "unicase",
        "title-caps",
        "thin",
        "ultra-light",
        "extra-light",
        "light",
        "semi-light",
        "demi-light",
        "book",
        "regular",
        "medium",
        "semi-bold",
        "demi-bold",
        "bold",
        "ultra-bold",
        "extra-bold",
        "heavy",
        "black",
        "ultra-black",
        "extra-black",
        "ultra-condensed",
        "extra-condensed",
        "condensed",
        "semi-condensed",
        "semi-expanded",
        "expanded",
        "extra-expanded",
        "ultra-expanded",
    }
)


@dataclass(frozen=True)
class FontDescription:
    family: str
    size: float | None = None
    styles: tuple[str, ...] = ()
    # Size given in device pixels ("12px") rather than points.
    absolute: bool = False

    def to_string(self) -> str:
        parts = [self.family]
        parts.extend(self.styles)
        if self.size is not None:
            size = f"{int(self.size)}" if float(self.size).is_integer() else f"{self.size:g}"
            parts.append(size + ("px" if self.absolute else ""))
        return " ".join(parts)

    def __str__(self) -> str:
        return self.to_string()


def parse_font_description(text: str | None) -> FontDescription | None:
    """Parse a font string; return None when it does not name a family."""

    if text is None:
        return None

    words = text.split()
    if not words:
        return None

    size: float | None = None
    absolute = False
    m = _SIZE_RE.match(words[-1])
    if m:
        size = float(m.group("size"))
        absolute = bool(m.group("px"))
        words.pop()
        if size <= 0:
            return None

    styles: list[str] = []
    while words and words[-1].lower() in STYLE_WORDS and not words[-1].endswith(","):
        styles.insert(0, words.pop())

    family = " ".join(words).strip().rstrip(",").strip()
    if not family:
        return None

    return FontDescription(family=family, size=size, styles=tuple(styles), absolute=absolute)
