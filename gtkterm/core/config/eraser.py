from __future__ import annotations

import logging
from pathlib import Path

from .errors import ConfigIOError, SectionNotFoundError
from .keyfile import find_group_spans, join_tokens, tokenize


logger = logging.getLogger(__name__)


def erase_section(path: Path | str, section: str) -> None:
    """Remove ``[section]`` and all of its lines from the file at *path*.

    The file is not parsed into key/value pairs; each span of the section
    (a header up to the next group header, or EOF) is cut out of the token
    stream and every other byte is written back unchanged. A header that is
    repeated in the file is removed at every occurrence, since a load merges
    them into one section.

    Raises SectionNotFoundError (file left untouched) when the section is
    absent, ConfigIOError when the file cannot be read or written.
    """

    path = Path(path)

    try:
        # newline="" keeps "\r\n" endings intact.
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigIOError(f"Cannot read {path}: {exc}") from exc

    tokens = tokenize(text, path=path)
    spans = find_group_spans(tokens, section)
    if not spans:
        raise SectionNotFoundError(section, path)

    remaining = list(tokens)
    # Back to front so earlier indices stay valid.
    for start, end in reversed(spans):
        del remaining[start:end]

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(join_tokens(remaining))
    except OSError as exc:
        raise ConfigIOError(f"Cannot write {path}: {exc}") from exc

    logger.debug("Removed section [%s] (%d occurrence(s)) from %s", section, len(spans), path)
