"""Macro list codec.

Macros are persisted as one flat string list: each macro contributes two
consecutive entries, its shortcut then its action.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .model import Macro


logger = logging.getLogger(__name__)


def encode_macros(macros: Iterable[Macro]) -> list[str]:
    out: list[str] = []
    for m in macros:
        out.append(m.shortcut)
        out.append(m.action)
    return out


def add_macro(macros: Iterable[Macro], macro: Macro) -> list[Macro]:
    """Return *macros* with *macro* appended, dropping any same-shortcut entry."""

    out = [m for m in macros if m.shortcut != macro.shortcut]
    out.append(macro)
    return out


def decode_macros(strings: Sequence[str] | None, existing: Iterable[Macro] = ()) -> list[Macro]:
    """Decode a flat ``[shortcut, action, ...]`` list.

    Pairs are applied in order on top of *existing*; a shortcut that is
    already bound is removed before the new pair is appended. An odd trailing
    entry has no action and is ignored.
    """

    macros = list(existing)
    if not strings:
        return macros

    if len(strings) % 2:
        logger.warning("Ignoring macro shortcut %r without an action", strings[-1])

    for i in range(0, len(strings) - 1, 2):
        macros = add_macro(macros, Macro(shortcut=strings[i], action=strings[i + 1]))
    return macros
