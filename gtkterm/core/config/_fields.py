from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .font import parse_font_description
from .keyfile import KeyFile
from .keys import ConfigKey
from .macros import decode_macros, encode_macros
from .model import Configuration


logger = logging.getLogger(__name__)

Reader = Callable[[KeyFile, str, Configuration], None]
Writer = Callable[[KeyFile, str, Configuration], None]


@dataclass(frozen=True)
class Field:
    key: ConfigKey
    attr: str
    read: Reader
    write: Writer


def get_attr(obj: Any, path: str) -> Any:
    for part in path.split("."):
        obj = getattr(obj, part)
    return obj


def set_attr(obj: Any, path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    for part in parents:
        obj = getattr(obj, part)
    setattr(obj, leaf, value)


def _read_or_warn(getter: Callable[[str, str], Any], section: str, key: ConfigKey) -> Any:
    try:
        return getter(section, key.value)
    except ValueError as exc:
        logger.warning("Ignoring invalid %s in [%s]: %s", key.value, section, exc)
        return None


def string_field(key: ConfigKey, attr: str) -> Field:
    def _read(kf: KeyFile, section: str, cfg: Configuration) -> None:
        v = _read_or_warn(kf.get_string, section, key)
        if v is not None:
            set_attr(cfg, attr, v)

    def _write(kf: KeyFile, section: str, cfg: Configuration) -> None:
        kf.set_string(section, key.value, str(get_attr(cfg, attr) or ""))

    return Field(key, attr, _read, _write)


def int_field(key: ConfigKey, attr: str, *, convert: Callable[[int], int] | None = None) -> Field:
    # Absent keys keep the default; an explicit 0 is a real value.
    def _read(kf: KeyFile, section: str, cfg: Configuration) -> None:
        v = _read_or_warn(kf.get_integer, section, key)
        if v is None:
            return
        set_attr(cfg, attr, convert(v) if convert is not None else v)

    def _write(kf: KeyFile, section: str, cfg: Configuration) -> None:
        kf.set_integer(section, key.value, int(get_attr(cfg, attr)))

    return Field(key, attr, _read, _write)


def bool_field(key: ConfigKey, attr: str) -> Field:
    # Absent booleans read as False, like GLib's key file getter.
    def _read(kf: KeyFile, section: str, cfg: Configuration) -> None:
        v = _read_or_warn(kf.get_boolean, section, key)
        set_attr(cfg, attr, bool(v))

    def _write(kf: KeyFile, section: str, cfg: Configuration) -> None:
        kf.set_boolean(section, key.value, bool(get_attr(cfg, attr)))

    return Field(key, attr, _read, _write)


def double_field(key: ConfigKey, attr: str) -> Field:
    def _read(kf: KeyFile, section: str, cfg: Configuration) -> None:
        v = _read_or_warn(kf.get_double, section, key)
        if v is not None:
            set_attr(cfg, attr, v)

    def _write(kf: KeyFile, section: str, cfg: Configuration) -> None:
        kf.set_double(section, key.value, float(get_attr(cfg, attr)))

    return Field(key, attr, _read, _write)


def enum_field(key: ConfigKey, attr: str, enum_cls: type[Enum]) -> Field:
    allowed = {m.value: m for m in enum_cls}

    def _read(kf: KeyFile, section: str, cfg: Configuration) -> None:
        v = _read_or_warn(kf.get_string, section, key)
        if v is None:
            return
        member = allowed.get(v.strip().lower())
        if member is None:
            logger.warning(
                "Unknown %s %r in [%s]; keeping %s",
                key.value,
                v,
                section,
                get_attr(cfg, attr).value,
            )
            return
        set_attr(cfg, attr, member)

    def _write(kf: KeyFile, section: str, cfg: Configuration) -> None:
        kf.set_string(section, key.value, get_attr(cfg, attr).value)

    return Field(key, attr, _read, _write)


def font_field(key: ConfigKey, attr: str) -> Field:
    # None marks an unusable descriptor; validation substitutes the default.
    def _read(kf: KeyFile, section: str, cfg: Configuration) -> None:
        v = _read_or_warn(kf.get_string, section, key)
        set_attr(cfg, attr, parse_font_description(v))

    def _write(kf: KeyFile, section: str, cfg: Configuration) -> None:
        font = get_attr(cfg, attr)
        kf.set_string(section, key.value, font.to_string() if font is not None else "")

    return Field(key, attr, _read, _write)


def macros_field(key: ConfigKey, attr: str) -> Field:
    def _read(kf: KeyFile, section: str, cfg: Configuration) -> None:
        v = _read_or_warn(kf.get_string_list, section, key)
        set_attr(cfg, attr, decode_macros(v, get_attr(cfg, attr)))

    def _write(kf: KeyFile, section: str, cfg: Configuration) -> None:
        kf.set_string_list(section, key.value, encode_macros(get_attr(cfg, attr)))

    return Field(key, attr, _read, _write)


def signed_char(value: int) -> int:
    return ((int(value) + 128) % 256) - 128
