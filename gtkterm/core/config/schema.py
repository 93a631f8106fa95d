"""Field table shared by section load and save."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ._fields import (
    Field,
    bool_field,
    double_field,
    enum_field,
    font_field,
    int_field,
    macros_field,
    signed_char,
    string_field,
)
from .keys import ConfigKey
from .model import FlowControl, Parity


FIELDS: tuple[Field, ...] = (
    # ---- serial port
    string_field(ConfigKey.SERIAL_PORT, "port.port"),
    int_field(ConfigKey.SERIAL_BAUDRATE, "port.baudrate"),
    int_field(ConfigKey.SERIAL_BITS, "port.bits"),
    int_field(ConfigKey.SERIAL_STOPBITS, "port.stopbits"),
    enum_field(ConfigKey.SERIAL_PARITY, "port.parity", Parity),
    enum_field(ConfigKey.SERIAL_FLOW_CONTROL, "port.flow_control", FlowControl),
    int_field(ConfigKey.SERIAL_RS485_RTS_TIME_BEFORE_TX, "port.rs485_rts_time_before_tx"),
    int_field(ConfigKey.SERIAL_RS485_RTS_TIME_AFTER_TX, "port.rs485_rts_time_after_tx"),
    bool_field(ConfigKey.SERIAL_DISABLE_PORT_LOCK, "port.disable_port_lock"),
    # ---- terminal
    int_field(ConfigKey.TERM_WAIT_DELAY, "terminal.wait_delay"),
    int_field(ConfigKey.TERM_WAIT_CHAR, "terminal.wait_char", convert=signed_char),
    macros_field(ConfigKey.TERM_MACROS, "macros"),
    string_field(ConfigKey.TERM_RAW_FILENAME, "terminal.raw_filename"),
    bool_field(ConfigKey.TERM_ECHO, "terminal.echo"),
    bool_field(ConfigKey.TERM_CRLF_AUTO, "terminal.crlf_auto"),
    font_field(ConfigKey.TERM_FONT, "terminal.font"),
    bool_field(ConfigKey.TERM_TIMESTAMP, "terminal.timestamp"),
    bool_field(ConfigKey.TERM_BLOCK_CURSOR, "terminal.block_cursor"),
    bool_field(ConfigKey.TERM_SHOW_CURSOR, "terminal.show_cursor"),
    int_field(ConfigKey.TERM_ROWS, "terminal.rows"),
    int_field(ConfigKey.TERM_COLS, "terminal.columns"),
    int_field(ConfigKey.TERM_SCROLLBACK, "terminal.scrollback"),
    bool_field(ConfigKey.TERM_VISUAL_BELL, "terminal.visual_bell"),
    # ---- colors
    double_field(ConfigKey.TERM_FOREGROUND_RED, "terminal.foreground.red"),
    double_field(ConfigKey.TERM_FOREGROUND_GREEN, "terminal.foreground.green"),
    double_field(ConfigKey.TERM_FOREGROUND_BLUE, "terminal.foreground.blue"),
    double_field(ConfigKey.TERM_FOREGROUND_ALPHA, "terminal.foreground.alpha"),
    double_field(ConfigKey.TERM_BACKGROUND_RED, "terminal.background.red"),
    double_field(ConfigKey.TERM_BACKGROUND_GREEN, "terminal.background.green"),
    double_field(ConfigKey.TERM_BACKGROUND_BLUE, "terminal.background.blue"),
    double_field(ConfigKey.TERM_BACKGROUND_ALPHA, "terminal.background.alpha"),
)


def _index(fields: tuple[Field, ...]) -> Mapping[ConfigKey, Field]:
    by_key: dict[ConfigKey, Field] = {}
    for f in fields:
        if f.key in by_key:
            raise RuntimeError(f"Config key {f.key.value!r} mapped twice")
        by_key[f.key] = f

    missing = [k.value for k in ConfigKey if k not in by_key]
    if missing:
        raise RuntimeError(f"Config keys without a field: {', '.join(missing)}")
    return MappingProxyType(by_key)


FIELDS_BY_KEY: Mapping[ConfigKey, Field] = _index(FIELDS)
