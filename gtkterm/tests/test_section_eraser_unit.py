#!/usr/bin/env python3
"""Unit tests for raw section removal (core/config/eraser.py)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from gtkterm.core.config import ConfigIOError, SectionNotFoundError, SectionStore, erase_section
from gtkterm.core.config.defaults import hard_default_configuration


DEFAULT_SPAN = "[default]\nport=/dev/ttyS0\nbaudrate=9600\n\n"
PROFILE_B_SPAN = "[profileB]\nport=/dev/ttyUSB0\nbaudrate=115200\nmacros=F1;AT\\r\\n;\n\n"
PROFILE_C_SPAN = "[profileC]\nport=/dev/ttyACM0\nbaudrate=57600\n"


def test_fixture_is_the_concatenation_of_the_spans(three_sections_file):
    assert three_sections_file.read_text(encoding="utf-8") == DEFAULT_SPAN + PROFILE_B_SPAN + PROFILE_C_SPAN


def test_erase_middle_section_keeps_neighbours_byte_identical(three_sections_file):
    erase_section(three_sections_file, "profileB")
    assert three_sections_file.read_text(encoding="utf-8") == DEFAULT_SPAN + PROFILE_C_SPAN


def test_erase_first_section(three_sections_file):
    erase_section(three_sections_file, "default")
    assert three_sections_file.read_text(encoding="utf-8") == PROFILE_B_SPAN + PROFILE_C_SPAN


def test_erase_last_section_runs_to_end_of_file(three_sections_file):
    erase_section(three_sections_file, "profileC")
    assert three_sections_file.read_text(encoding="utf-8") == DEFAULT_SPAN + PROFILE_B_SPAN


def test_erase_missing_section_raises_and_leaves_file(three_sections_file):
    before = three_sections_file.read_bytes()

    with pytest.raises(SectionNotFoundError):
        erase_section(three_sections_file, "profileZ")

    assert three_sections_file.read_bytes() == before


def test_section_name_prefix_does_not_match(three_sections_file):
    with pytest.raises(SectionNotFoundError):
        erase_section(three_sections_file, "profile")


def test_bracket_in_a_value_does_not_end_the_section(tmp_path):
    path = tmp_path / "rc"
    path.write_text("[a]\nmacros=F1;[x];\nport=/dev/ttyS1\n[b]\nport=/dev/ttyS2\n", encoding="utf-8")

    erase_section(path, "a")

    assert path.read_text(encoding="utf-8") == "[b]\nport=/dev/ttyS2\n"


def test_crlf_line_endings_are_preserved(tmp_path):
    path = tmp_path / "rc"
    path.write_bytes(b"[a]\r\nx=1\r\n[b]\r\ny=2\r\n")

    erase_section(path, "a")

    assert path.read_bytes() == b"[b]\r\ny=2\r\n"


def test_missing_file_raises_io_error(tmp_path):
    with pytest.raises(ConfigIOError):
        erase_section(tmp_path / "missing", "default")


def test_write_failure_raises_io_error(three_sections_file):
    before = three_sections_file.read_bytes()
    real_open = open

    def _fail_on_write(file, mode="r", *args, **kwargs):
        if "w" in mode:
            raise PermissionError("read-only")
        return real_open(file, mode, *args, **kwargs)

    with patch("builtins.open", side_effect=_fail_on_write):
        with pytest.raises(ConfigIOError):
            erase_section(three_sections_file, "profileB")

    assert three_sections_file.read_bytes() == before


def test_erased_section_no_longer_loads_but_others_do(three_sections_file):
    erase_section(three_sections_file, "profileB")
    store = SectionStore(three_sections_file)

    with pytest.raises(SectionNotFoundError):
        store.load("profileB")
    assert store.load("profileC").configuration.port.baudrate == 57600


def test_erase_after_structured_save(tmp_path):
    path = tmp_path / "rc"
    store = SectionStore(path)
    store.save("default", hard_default_configuration())
    store.save("old", hard_default_configuration())

    other = SectionStore(tmp_path / "reference")
    other.save("default", hard_default_configuration())
    default_only = (tmp_path / "reference").read_text(encoding="utf-8")

    erase_section(path, "old")

    # The blank separator before [old] belongs to [default]'s span.
    assert path.read_text(encoding="utf-8") == default_only + "\n"


def test_repeated_header_is_erased_at_every_occurrence(tmp_path):
    path = tmp_path / "rc"
    path.write_text("[a]\nbaudrate=1200\n[b]\nbaudrate=2400\n[a]\nbits=7\n", encoding="utf-8")

    erase_section(path, "a")

    assert path.read_text(encoding="utf-8") == "[b]\nbaudrate=2400\n"
    store = SectionStore(path)
    assert store.sections() == ["b"]
    with pytest.raises(SectionNotFoundError):
        store.load("a")
