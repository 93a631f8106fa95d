"""Key names used in a configuration section.

This enum is the single list of recognized keys. The field table in
``_fields.py`` maps every member to exactly one codec, and both load and save
walk that table.
"""

from __future__ import annotations

from enum import Enum


class ConfigKey(str, Enum):
    SERIAL_PORT = "port"
    SERIAL_BAUDRATE = "baudrate"
    SERIAL_BITS = "bits"
    SERIAL_STOPBITS = "stopbits"
    SERIAL_PARITY = "parity"
    SERIAL_FLOW_CONTROL = "flow_control"
    TERM_WAIT_DELAY = "term_wait_delay"
    TERM_WAIT_CHAR = "term_wait_char"
    SERIAL_RS485_RTS_TIME_BEFORE_TX = "rs485_rts_time_before_tx"
    SERIAL_RS485_RTS_TIME_AFTER_TX = "rs485_rts_time_after_tx"
    TERM_MACROS = "macros"
    TERM_RAW_FILENAME = "term_raw_filename"
    TERM_ECHO = "term_echo"
    TERM_CRLF_AUTO = "term_crlfauto"
    SERIAL_DISABLE_PORT_LOCK = "disable_port_lock"
    TERM_FONT = "term_font"
    TERM_TIMESTAMP = "term_show_timestamp"
    TERM_BLOCK_CURSOR = "term_block_cursor"
    TERM_SHOW_CURSOR = "term_show_cursor"
    TERM_ROWS = "term_rows"
    TERM_COLS = "term_columns"
    TERM_SCROLLBACK = "term_scrollback"
    TERM_VISUAL_BELL = "term_visual_bell"
    TERM_FOREGROUND_RED = "term_foreground_red"
    TERM_FOREGROUND_GREEN = "term_foreground_green"
    TERM_FOREGROUND_BLUE = "term_foreground_blue"
    TERM_FOREGROUND_ALPHA = "term_foreground_alpha"
    TERM_BACKGROUND_RED = "term_background_red"
    TERM_BACKGROUND_GREEN = "term_background_green"
    TERM_BACKGROUND_BLUE = "term_background_blue"
    TERM_BACKGROUND_ALPHA = "term_background_alpha"

    def __str__(self) -> str:
        return self.value
