from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

from gtkterm.core.logging_utils import reset_log_throttle


# Safety default: during pytest, never touch the user's real configuration,
# even from code that runs at import time before any fixture applies.
_SESSION_HOME = Path(tempfile.mkdtemp(prefix="gtkterm-test-home-"))
os.environ["HOME"] = str(_SESSION_HOME)
os.environ["XDG_CONFIG_HOME"] = str(_SESSION_HOME / ".config")
os.environ.pop("GTKTERM_CONFIG_PATH", None)


@pytest.fixture(autouse=True)
def isolated_config_env(tmp_path, monkeypatch):
    """Point HOME and XDG_CONFIG_HOME at a fresh per-test directory."""

    home = tmp_path / "home"
    xdg = home / ".config"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    monkeypatch.delenv("GTKTERM_CONFIG_PATH", raising=False)
    monkeypatch.delenv("GTKTERM_DEBUG", raising=False)
    reset_log_throttle()
    return home


@pytest.fixture
def config_file(isolated_config_env) -> Path:
    """Path of the current (XDG) configuration file for this test."""

    return isolated_config_env / ".config" / ".gtktermrc"


THREE_SECTIONS = (
    "[default]\n"
    "port=/dev/ttyS0\n"
    "baudrate=9600\n"
    "\n"
    "[profileB]\n"
    "port=/dev/ttyUSB0\n"
    "baudrate=115200\n"
    "macros=F1;AT\\r\\n;\n"
    "\n"
    "[profileC]\n"
    "port=/dev/ttyACM0\n"
    "baudrate=57600\n"
)


@pytest.fixture
def three_sections_file(tmp_path) -> Path:
    p = tmp_path / "three.rc"
    p.write_text(THREE_SECTIONS, encoding="utf-8")
    return p
