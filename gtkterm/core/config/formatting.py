from __future__ import annotations

from .model import Color, Configuration, FlowControl, Parity


_LABEL_WIDTH = 25

_PARITY_NAMES = {
    Parity.NONE: "none",
    Parity.ODD: "odd",
    Parity.EVEN: "even",
}

_FLOW_NAMES = {
    FlowControl.NONE: "none",
    FlowControl.XON_XOFF: "xon/xoff",
    FlowControl.RTS_CTS: "rts/cts",
    FlowControl.RS485_HALF_DUPLEX: "rs485",
}


def _row(label: str, value: object) -> str:
    return f"{label:<{_LABEL_WIDTH}}: {value}"


def _flag(value: bool) -> str:
    return "True" if value else "False"


def _append_color(lines: list[str], name: str, color: Color) -> None:
    for component in ("red", "blue", "green", "alpha"):
        lines.append(_row(f"{name} color {component}", f"{getattr(color, component):f}"))


def format_configuration_text(section: str, configuration: Configuration) -> str:
    """Render a loaded section as the fixed layout printed by ``--show-config``."""

    port = configuration.port
    term = configuration.terminal

    lines: list[str] = [f"Configuration loaded from file: [{section}]"]

    lines.append("")
    lines.append("Serial port")
    lines.append(_row("Port", port.port))
    lines.append(_row("Speed", port.baudrate))
    lines.append(_row("Bits", port.bits))
    lines.append(_row("Stopbits", port.stopbits))
    lines.append(_row("Parity", _PARITY_NAMES.get(port.parity, "unknown")))
    lines.append(_row("Flow control", _FLOW_NAMES.get(port.flow_control, "unknown")))
    lines.append(_row("RS485 RTS time before TX", port.rs485_rts_time_before_tx))
    lines.append(_row("RS485 RTS time after TX", port.rs485_rts_time_after_tx))
    lines.append(_row("Disable port lock", _flag(port.disable_port_lock)))

    lines.append("")
    lines.append("Terminal")
    lines.append(_row("Font", term.font.to_string() if term.font is not None else "(none)"))
    lines.append(_row("Echo", _flag(term.echo)))
    lines.append(_row("CRLF", _flag(term.crlf_auto)))
    lines.append(_row("Wait delay", term.wait_delay))
    lines.append(_row("Wait char", term.wait_char))
    lines.append(_row("Timestamp", _flag(term.timestamp)))
    lines.append(_row("Block cursor", _flag(term.block_cursor)))
    lines.append(_row("Show cursor", _flag(term.show_cursor)))
    lines.append(_row("Rows", term.rows))
    lines.append(_row("Cols", term.columns))
    lines.append(_row("Scrollback", term.scrollback))
    lines.append(_row("Visual bell", _flag(term.visual_bell)))
    _append_color(lines, "Background", term.background)
    _append_color(lines, "Foreground", term.foreground)

    lines.append("")
    lines.append("Macro's")
    lines.append(" Nr  Shortcut  Command")
    for i, m in enumerate(configuration.macros):
        lines.append(f"[{i:2d}] {m.shortcut:<8}  {m.action}")

    return "\n".join(lines) + "\n"
