"""Default configuration values.

Split out from the model so the store, the validator and the CLI share one
set of hard-coded defaults.
"""

from __future__ import annotations

from .font import FontDescription, parse_font_description
from .model import Color, Configuration, FlowControl, Parity, PortConfig, TerminalConfig


DEFAULT_SECTION = "default"

DEFAULT_PORT = "/dev/ttyS0"
DEFAULT_BAUDRATE = 9600
DEFAULT_BITS = 8
DEFAULT_STOPBITS = 1
DEFAULT_DELAY = 0  # end-of-line wait, ms
DEFAULT_CHAR = -1
DEFAULT_DELAY_RS485 = 30  # ms
DEFAULT_ECHO = False
DEFAULT_SCROLLBACK = 200
DEFAULT_ROWS = 25
DEFAULT_COLUMNS = 80
DEFAULT_FONT = "Monospace, 12"

WAIT_DELAY_MIN = 0
WAIT_DELAY_MAX = 500

# Rates every common UART supports. Others may still work on some hardware.
RECOGNIZED_BAUDRATES: frozenset[int] = frozenset(
    {
        300,
        600,
        1200,
        2400,
        4800,
        9600,
        19200,
        38400,
        57600,
        115200,
        230400,
        460800,
        576000,
        921600,
        1000000,
        2000000,
    }
)


def default_font() -> FontDescription:
    font = parse_font_description(DEFAULT_FONT)
    assert font is not None
    return font


def hard_default_configuration() -> Configuration:
    """Return a fresh configuration built from hard-coded defaults."""

    port = PortConfig(
        port=DEFAULT_PORT,
        baudrate=DEFAULT_BAUDRATE,
        bits=DEFAULT_BITS,
        stopbits=DEFAULT_STOPBITS,
        parity=Parity.NONE,
        flow_control=FlowControl.NONE,
        rs485_rts_time_before_tx=DEFAULT_DELAY_RS485,
        rs485_rts_time_after_tx=DEFAULT_DELAY_RS485,
        disable_port_lock=False,
    )
    terminal = TerminalConfig(
        echo=DEFAULT_ECHO,
        crlf_auto=False,
        timestamp=False,
        block_cursor=True,
        show_cursor=True,
        visual_bell=True,
        wait_delay=DEFAULT_DELAY,
        wait_char=DEFAULT_CHAR,
        rows=DEFAULT_ROWS,
        columns=DEFAULT_COLUMNS,
        scrollback=DEFAULT_SCROLLBACK,
        foreground=Color(0.66, 0.66, 0.66, 1.0),
        background=Color(0.0, 0.0, 0.0, 1.0),
        font=default_font(),
        raw_filename="",
    )
    return Configuration(port=port, terminal=terminal, macros=[])
