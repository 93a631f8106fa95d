"""Key file tokenizer and document model.

The configuration file uses the GLib key file layout::

    [default]
    port=/dev/ttyS0
    macros=F1;AT\\r\\n;

Every physical line becomes exactly one :class:`Token` and joining the tokens'
``raw`` text gives back the input unchanged. The structured :class:`KeyFile`
and the section eraser both work on this token stream, so they always agree
on where a section starts and ends.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from .errors import ConfigParseError


LIST_SEPARATOR = ";"

_INT_RE = re.compile(r"^[+-]?[0-9]+$")

_ESCAPES = {
    "s": " ",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
}


class TokenKind(str, Enum):
    GROUP = "group"
    ENTRY = "entry"
    COMMENT = "comment"
    BLANK = "blank"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    raw: str
    lineno: int = 0
    # Group name for GROUP tokens, key for ENTRY tokens.
    name: str = ""
    # Still-escaped value text for ENTRY tokens.
    value: str = ""


def _split_lines(text: str) -> list[str]:
    # Only "\n" (optionally preceded by "\r") ends a line; str.splitlines()
    # would also break on form feeds and unicode separators inside values.
    lines = text.split("\n")
    out = [line + "\n" for line in lines[:-1]]
    if lines[-1]:
        out.append(lines[-1])
    return out


def tokenize(text: str, *, path: Path | str | None = None) -> list[Token]:
    """Split key file text into one token per physical line.

    Raises ConfigParseError for lines that are neither a group header, a
    ``key=value`` entry, a comment nor blank, and for entries that appear
    before the first group.
    """

    tokens: list[Token] = []
    seen_group = False

    for lineno, raw in enumerate(_split_lines(text), start=1):
        line = raw.rstrip("\n").rstrip("\r")
        stripped = line.strip()

        if not stripped:
            tokens.append(Token(TokenKind.BLANK, raw, lineno))
            continue

        if stripped.startswith("#"):
            tokens.append(Token(TokenKind.COMMENT, raw, lineno))
            continue

        if stripped.startswith("["):
            name = stripped[1:-1] if stripped.endswith("]") else ""
            if not name or "[" in name or "]" in name:
                raise ConfigParseError(f"Invalid group header {stripped!r}", path=path, line=lineno)
            tokens.append(Token(TokenKind.GROUP, raw, lineno, name=name))
            seen_group = True
            continue

        if "=" not in line:
            raise ConfigParseError(
                f"Line {stripped!r} is not a key-value pair, group, or comment",
                path=path,
                line=lineno,
            )

        if not seen_group:
            raise ConfigParseError("Key file does not start with a group", path=path, line=lineno)

        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            raise ConfigParseError(f"Empty key in line {stripped!r}", path=path, line=lineno)

        tokens.append(Token(TokenKind.ENTRY, raw, lineno, name=key, value=value.lstrip(" \t")))

    return tokens


def find_group_spans(tokens: Sequence[Token], name: str) -> list[tuple[int, int]]:
    """Return the ``[start, end)`` token spans of every group called *name*.

    A span starts at the group header and ends right before the next group
    header, or at the end of the token list. Repeated headers each get their
    own span, in file order.
    """

    spans: list[tuple[int, int]] = []
    start = None
    for i, tok in enumerate(tokens):
        if tok.kind is not TokenKind.GROUP:
            continue
        if start is not None:
            spans.append((start, i))
            start = None
        if tok.name == name:
            start = i

    if start is not None:
        spans.append((start, len(tokens)))
    return spans


def join_tokens(tokens: Iterable[Token]) -> str:
    return "".join(tok.raw for tok in tokens)


# ---- value escaping


def escape_value(value: str, *, separator: str | None = None) -> str:
    out: list[str] = []
    for i, ch in enumerate(value):
        if ch == " " and i == 0:
            out.append("\\s")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\t":
            out.append("\\t")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\\":
            out.append("\\\\")
        elif separator is not None and ch == separator:
            out.append("\\" + separator)
        else:
            out.append(ch)
    return "".join(out)


def unescape_value(raw: str) -> str:
    out: list[str] = []
    it = iter(raw)
    for ch in it:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(it, None)
        if nxt is None:
            raise ValueError(f"Value {raw!r} ends with a stray escape character")
        if nxt in _ESCAPES:
            out.append(_ESCAPES[nxt])
        elif nxt == LIST_SEPARATOR:
            out.append(nxt)
        else:
            raise ValueError(f"Value {raw!r} contains invalid escape sequence \\{nxt}")
    return "".join(out)


def split_list(raw: str, separator: str = LIST_SEPARATOR) -> list[str]:
    """Split a still-escaped list value into unescaped elements.

    A trailing separator is optional: ``a;b;`` and ``a;b`` both give two
    elements.
    """

    pieces: list[str] = []
    current: list[str] = []
    it = iter(raw)
    for ch in it:
        if ch == "\\":
            nxt = next(it, None)
            if nxt is None:
                raise ValueError(f"Value {raw!r} ends with a stray escape character")
            current.append(ch + nxt)
        elif ch == separator:
            pieces.append("".join(current))
            current = []
        else:
            current.append(ch)
    if current:
        pieces.append("".join(current))
    return [unescape_value(p) for p in pieces]


def join_list(values: Iterable[str], separator: str = LIST_SEPARATOR) -> str:
    return "".join(escape_value(v, separator=separator) + separator for v in values)


# ---- document


@dataclass
class _Chunk:
    """One group header and the lines up to the next header."""

    header: Token
    body: list[Token] = field(default_factory=list)

    def find(self, key: str) -> int | None:
        # Duplicate keys: the last one wins.
        for i in range(len(self.body) - 1, -1, -1):
            tok = self.body[i]
            if tok.kind is TokenKind.ENTRY and tok.name == key:
                return i
        return None


class KeyFile:
    """Ordered, comment-preserving key file document.

    A group whose header is repeated in the file is read as one group (later
    keys win), but every occurrence is kept as its own chunk and written back
    where it was.
    """

    def __init__(self) -> None:
        self._leading: list[Token] = []
        self._chunks: list[_Chunk] = []
        self._groups: dict[str, list[_Chunk]] = {}

    @classmethod
    def from_text(cls, text: str, *, path: Path | str | None = None) -> "KeyFile":
        kf = cls()
        chunk: _Chunk | None = None
        for tok in tokenize(text, path=path):
            if tok.kind is TokenKind.GROUP:
                chunk = kf._add_chunk(tok)
                continue
            if chunk is None:
                kf._leading.append(tok)
            else:
                chunk.body.append(tok)
        return kf

    def to_text(self) -> str:
        parts = [join_tokens(self._leading)]
        for chunk in self._chunks:
            parts.append(chunk.header.raw)
            parts.append(join_tokens(chunk.body))
        return "".join(parts)

    def _add_chunk(self, header: Token) -> _Chunk:
        chunk = _Chunk(header=header)
        self._chunks.append(chunk)
        self._groups.setdefault(header.name, []).append(chunk)
        return chunk

    # ---- groups

    def groups(self) -> list[str]:
        return list(self._groups)

    def has_group(self, name: str) -> bool:
        return name in self._groups

    def remove_group(self, name: str) -> bool:
        chunks = self._groups.pop(name, None)
        if chunks is None:
            return False
        self._chunks = [c for c in self._chunks if c.header.name != name]
        return True

    def keys(self, group: str) -> list[str]:
        out: list[str] = []
        for chunk in self._groups.get(group, []):
            for tok in chunk.body:
                if tok.kind is TokenKind.ENTRY and tok.name not in out:
                    out.append(tok.name)
        return out

    def has_key(self, group: str, key: str) -> bool:
        return self.get_value(group, key) is not None

    def _find(self, group: str, key: str) -> tuple[_Chunk, int] | None:
        for chunk in reversed(self._groups.get(group, [])):
            idx = chunk.find(key)
            if idx is not None:
                return chunk, idx
        return None

    def _ensure_group(self, name: str) -> _Chunk:
        chunks = self._groups.get(name)
        if chunks:
            # New keys go to the last occurrence of the group.
            return chunks[-1]

        previous = self._last_tokens()
        if previous is not None:
            if previous and not previous[-1].raw.endswith("\n"):
                last = previous[-1]
                previous[-1] = Token(last.kind, last.raw + "\n", last.lineno, last.name, last.value)
            if previous and previous[-1].kind is not TokenKind.BLANK:
                previous.append(Token(TokenKind.BLANK, "\n"))

        return self._add_chunk(Token(TokenKind.GROUP, f"[{name}]\n", name=name))

    def _last_tokens(self) -> list[Token] | None:
        if self._chunks:
            last = self._chunks[-1]
            if not last.body and not last.header.raw.endswith("\n"):
                # Bare header at EOF without a line ending.
                h = last.header
                last.header = Token(h.kind, h.raw + "\n", h.lineno, h.name)
            return last.body
        if self._leading:
            return self._leading
        return None

    # ---- raw values

    def get_value(self, group: str, key: str) -> str | None:
        found = self._find(group, key)
        if found is None:
            return None
        chunk, idx = found
        return chunk.body[idx].value

    def set_value(self, group: str, key: str, value: str) -> None:
        tok = Token(TokenKind.ENTRY, f"{key}={value}\n", name=key, value=value)

        found = self._find(group, key)
        if found is not None:
            chunk, idx = found
            chunk.body[idx] = tok
            return

        body = self._ensure_group(group).body
        # Append after the last entry so trailing blank lines and comments
        # that introduce the next group stay where they are.
        insert_at = 0
        for i, existing in enumerate(body):
            if existing.kind is TokenKind.ENTRY:
                insert_at = i + 1
        if insert_at and not body[insert_at - 1].raw.endswith("\n"):
            prev = body[insert_at - 1]
            body[insert_at - 1] = Token(prev.kind, prev.raw + "\n", prev.lineno, prev.name, prev.value)
        body.insert(insert_at, tok)

    # ---- typed access

    def get_string(self, group: str, key: str) -> str | None:
        raw = self.get_value(group, key)
        if raw is None:
            return None
        return unescape_value(raw)

    def set_string(self, group: str, key: str, value: str) -> None:
        self.set_value(group, key, escape_value(value))

    def get_integer(self, group: str, key: str) -> int | None:
        raw = self.get_value(group, key)
        if raw is None:
            return None
        text = raw.strip()
        if not _INT_RE.match(text):
            raise ValueError(f"Value {raw!r} cannot be interpreted as a number")
        return int(text)

    def set_integer(self, group: str, key: str, value: int) -> None:
        self.set_value(group, key, str(int(value)))

    def get_double(self, group: str, key: str) -> float | None:
        raw = self.get_value(group, key)
        if raw is None:
            return None
        text = raw.strip()
        try:
            if "_" in text:
                raise ValueError(text)
            return float(text)
        except ValueError:
            raise ValueError(f"Value {raw!r} cannot be interpreted as a float number") from None

    def set_double(self, group: str, key: str, value: float) -> None:
        self.set_value(group, key, repr(float(value)))

    def get_boolean(self, group: str, key: str) -> bool | None:
        raw = self.get_value(group, key)
        if raw is None:
            return None
        text = raw.strip()
        if text in ("true", "1"):
            return True
        if text in ("false", "0"):
            return False
        raise ValueError(f"Value {raw!r} cannot be interpreted as a boolean")

    def set_boolean(self, group: str, key: str, value: bool) -> None:
        self.set_value(group, key, "true" if value else "false")

    def get_string_list(self, group: str, key: str) -> list[str] | None:
        raw = self.get_value(group, key)
        if raw is None:
            return None
        return split_list(raw)

    def set_string_list(self, group: str, key: str, values: Iterable[str]) -> None:
        self.set_value(group, key, join_list(values))

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __contains__(self, name: object) -> bool:
        return name in self._groups
