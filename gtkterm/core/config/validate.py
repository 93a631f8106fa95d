"""Post-load repair of a configuration.

Validation never fails: out-of-range fields are reset to their defaults and
each correction is reported as a :class:`ValidationWarning`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .defaults import (
    DEFAULT_BITS,
    DEFAULT_DELAY,
    DEFAULT_STOPBITS,
    RECOGNIZED_BAUDRATES,
    WAIT_DELAY_MAX,
    WAIT_DELAY_MIN,
    default_font,
)
from .model import Configuration


@dataclass(frozen=True)
class ValidationWarning:
    field: str
    value: Any
    # None when the value was kept as-is.
    replacement: Any
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationReport:
    configuration: Configuration
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings


def validate_configuration(configuration: Configuration) -> ValidationReport:
    """Return a corrected copy of *configuration* plus what was corrected."""

    cfg = configuration.copy()
    warnings: list[ValidationWarning] = []
    port = cfg.port
    term = cfg.terminal

    if port.baudrate not in RECOGNIZED_BAUDRATES:
        warnings.append(
            ValidationWarning(
                field="port.baudrate",
                value=port.baudrate,
                replacement=None,
                message=f"Baudrate {port.baudrate} may not be supported by all hardware",
            )
        )

    if port.stopbits not in (1, 2):
        warnings.append(
            ValidationWarning(
                field="port.stopbits",
                value=port.stopbits,
                replacement=DEFAULT_STOPBITS,
                message=(
                    f"Invalid number of stop-bits: {port.stopbits}. "
                    f"Falling back to default number of stop-bits: {DEFAULT_STOPBITS}"
                ),
            )
        )
        port.stopbits = DEFAULT_STOPBITS

    if port.bits < 5 or port.bits > 8:
        warnings.append(
            ValidationWarning(
                field="port.bits",
                value=port.bits,
                replacement=DEFAULT_BITS,
                message=f"Invalid number of bits: {port.bits}. Falling back to default number of bits: {DEFAULT_BITS}",
            )
        )
        port.bits = DEFAULT_BITS

    if term.wait_delay < WAIT_DELAY_MIN or term.wait_delay > WAIT_DELAY_MAX:
        warnings.append(
            ValidationWarning(
                field="terminal.wait_delay",
                value=term.wait_delay,
                replacement=DEFAULT_DELAY,
                message=f"Invalid delay: {term.wait_delay} ms. Falling back to default delay: {DEFAULT_DELAY} ms",
            )
        )
        term.wait_delay = DEFAULT_DELAY

    if term.font is None:
        term.font = default_font()

    return ValidationReport(configuration=cfg, warnings=warnings)
