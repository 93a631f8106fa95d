"""In-memory configuration model.

A :class:`Configuration` is an owned value: loading a section returns a fresh
one and saving takes one as an argument, so several sections can be held in
memory at the same time.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

from .font import FontDescription


class Parity(str, Enum):
    NONE = "none"
    ODD = "odd"
    EVEN = "even"


class FlowControl(str, Enum):
    NONE = "none"
    XON_XOFF = "xon"
    RTS_CTS = "rts"
    RS485_HALF_DUPLEX = "rs485"


@dataclass
class Color:
    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)


@dataclass(frozen=True)
class Macro:
    shortcut: str
    action: str


@dataclass
class PortConfig:
    port: str
    baudrate: int
    bits: int
    stopbits: int
    parity: Parity
    flow_control: FlowControl
    # Milliseconds between RTS on and transmit start / transmit end and RTS off.
    rs485_rts_time_before_tx: int
    rs485_rts_time_after_tx: int
    disable_port_lock: bool = False


@dataclass
class TerminalConfig:
    echo: bool
    crlf_auto: bool
    timestamp: bool
    block_cursor: bool
    show_cursor: bool
    visual_bell: bool
    wait_delay: int
    # Signed byte; -1 means no end-of-line wait character.
    wait_char: int
    rows: int
    columns: int
    scrollback: int
    foreground: Color
    background: Color
    font: FontDescription | None
    raw_filename: str = ""


@dataclass
class Configuration:
    port: PortConfig
    terminal: TerminalConfig
    macros: list[Macro] = field(default_factory=list)

    def copy(self) -> "Configuration":
        return copy.deepcopy(self)
