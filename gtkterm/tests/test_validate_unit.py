#!/usr/bin/env python3
"""Unit tests for post-load validation (core/config/validate.py)."""

from __future__ import annotations

import pytest

from gtkterm.core.config.defaults import (
    DEFAULT_BITS,
    DEFAULT_DELAY,
    DEFAULT_STOPBITS,
    default_font,
    hard_default_configuration,
)
from gtkterm.core.config.validate import validate_configuration


def test_defaults_validate_cleanly():
    report = validate_configuration(hard_default_configuration())
    assert report.ok
    assert report.warnings == []


@pytest.mark.parametrize("baudrate", [250000, 1, 0])
def test_unrecognized_baudrate_is_kept_with_warning(baudrate):
    cfg = hard_default_configuration()
    cfg.port.baudrate = baudrate

    report = validate_configuration(cfg)

    assert report.configuration.port.baudrate == baudrate
    assert [w.field for w in report.warnings] == ["port.baudrate"]
    assert report.warnings[0].replacement is None
    assert str(baudrate) in report.warnings[0].message


@pytest.mark.parametrize("baudrate", [300, 115200, 576000, 2000000])
def test_recognized_baudrates_do_not_warn(baudrate):
    cfg = hard_default_configuration()
    cfg.port.baudrate = baudrate
    assert validate_configuration(cfg).ok


@pytest.mark.parametrize("stopbits", [0, 3, 255])
def test_invalid_stopbits_fall_back_to_default(stopbits):
    cfg = hard_default_configuration()
    cfg.port.stopbits = stopbits

    report = validate_configuration(cfg)

    assert report.configuration.port.stopbits == DEFAULT_STOPBITS
    assert len(report.warnings) == 1
    w = report.warnings[0]
    assert (w.field, w.value, w.replacement) == ("port.stopbits", stopbits, DEFAULT_STOPBITS)


def test_two_stopbits_are_valid():
    cfg = hard_default_configuration()
    cfg.port.stopbits = 2
    report = validate_configuration(cfg)
    assert report.ok
    assert report.configuration.port.stopbits == 2


@pytest.mark.parametrize("bits", [4, 9])
def test_invalid_bits_fall_back_to_default(bits):
    cfg = hard_default_configuration()
    cfg.port.bits = bits

    report = validate_configuration(cfg)

    assert report.configuration.port.bits == DEFAULT_BITS
    assert [w.field for w in report.warnings] == ["port.bits"]


@pytest.mark.parametrize("bits", [5, 6, 7, 8])
def test_bits_in_range_are_valid(bits):
    cfg = hard_default_configuration()
    cfg.port.bits = bits
    assert validate_configuration(cfg).configuration.port.bits == bits


@pytest.mark.parametrize("delay", [-5, 600])
def test_invalid_wait_delay_falls_back_to_default(delay):
    cfg = hard_default_configuration()
    cfg.terminal.wait_delay = delay

    report = validate_configuration(cfg)

    assert report.configuration.terminal.wait_delay == DEFAULT_DELAY
    assert [w.field for w in report.warnings] == ["terminal.wait_delay"]


@pytest.mark.parametrize("delay", [0, 250, 500])
def test_wait_delay_bounds_are_inclusive(delay):
    cfg = hard_default_configuration()
    cfg.terminal.wait_delay = delay
    assert validate_configuration(cfg).ok


def test_missing_font_is_replaced_silently():
    cfg = hard_default_configuration()
    cfg.terminal.font = None

    report = validate_configuration(cfg)

    assert report.configuration.terminal.font == default_font()
    assert report.ok


def test_validation_does_not_mutate_input():
    cfg = hard_default_configuration()
    cfg.port.stopbits = 7
    cfg.terminal.font = None

    validate_configuration(cfg)

    assert cfg.port.stopbits == 7
    assert cfg.terminal.font is None


def test_multiple_problems_are_all_reported():
    cfg = hard_default_configuration()
    cfg.port.baudrate = 12345
    cfg.port.stopbits = 0
    cfg.port.bits = 4
    cfg.terminal.wait_delay = 9999

    report = validate_configuration(cfg)

    assert [w.field for w in report.warnings] == [
        "port.baudrate",
        "port.stopbits",
        "port.bits",
        "terminal.wait_delay",
    ]
