"""Section store: load and save named configuration sections.

Each section of the key file holds one complete :class:`Configuration`.
Loading always starts from the hard-coded defaults, so a load is never a
partial merge over whatever was loaded before.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .defaults import DEFAULT_SECTION, hard_default_configuration
from .eraser import erase_section
from .errors import ConfigIOError, ConfigParseError, SectionNotFoundError
from .keyfile import KeyFile
from .model import Configuration
from .paths import config_file_path
from .schema import FIELDS
from .validate import ValidationReport, validate_configuration


logger = logging.getLogger(__name__)


def read_key_file(path: Path) -> KeyFile:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Failed to load configuration file: {exc}", path=path) from exc
    return KeyFile.from_text(text, path=path)


def write_key_file_atomic(path: Path, key_file: KeyFile) -> None:
    """Write the whole document in one go (temp file then replace)."""

    tmp_path: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=str(path.parent))
        with os.fdopen(tmp_fd, "w", encoding="utf-8", newline="") as f:
            f.write(key_file.to_text())
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except OSError as exc:
        raise ConfigIOError(f"Failed to save configuration to {path}: {exc}") from exc
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            try:
                os.unlink(tmp_path)
            except OSError as exc:
                logger.debug("Failed to remove temp config file %s: %s", tmp_path, exc)


def configuration_to_section(key_file: KeyFile, section: str, configuration: Configuration) -> None:
    """Copy every field of *configuration* into *section* of *key_file*."""

    for f in FIELDS:
        f.write(key_file, section, configuration)


def configuration_from_section(key_file: KeyFile, section: str) -> Configuration:
    """Build an unvalidated configuration from *section*, defaults first."""

    if not key_file.has_group(section):
        raise SectionNotFoundError(section)

    cfg = hard_default_configuration()
    for f in FIELDS:
        f.read(key_file, section, cfg)
    return cfg


class SectionStore:
    """Named configuration sections persisted in one key file."""

    def __init__(self, path: Path | str | None = None) -> None:
        # Resolved at construction time so test harnesses can set env vars.
        self.path = Path(path) if path is not None else config_file_path()

    def exists(self) -> bool:
        return self.path.exists()

    def _read(self) -> KeyFile:
        return read_key_file(self.path)

    def sections(self) -> list[str]:
        if not self.path.exists():
            return []
        return self._read().groups()

    def has_section(self, section: str) -> bool:
        return section in self.sections()

    def load(self, section: str) -> ValidationReport:
        """Load *section* and run validation on it.

        Raises ConfigParseError when the file cannot be read or parsed and
        SectionNotFoundError when the section is absent.
        """

        key_file = self._read()
        if not key_file.has_group(section):
            raise SectionNotFoundError(section, self.path)

        report = validate_configuration(configuration_from_section(key_file, section))
        for w in report.warnings:
            logger.warning("[%s] %s", section, w.message)
        return report

    def load_all(self) -> dict[str, Configuration]:
        """Load and validate every section of the file."""

        key_file = self._read()
        out: dict[str, Configuration] = {}
        for name in key_file.groups():
            report = validate_configuration(configuration_from_section(key_file, name))
            for w in report.warnings:
                logger.warning("[%s] %s", name, w.message)
            out[name] = report.configuration
        return out

    def save(self, section: str, configuration: Configuration) -> None:
        """Write *configuration* into *section*; other sections are kept as-is.

        Raises ConfigIOError when the file cannot be written and
        ConfigParseError when an existing file is too broken to rewrite.
        """

        key_file = self._read() if self.path.exists() else KeyFile()
        configuration_to_section(key_file, section, configuration)
        write_key_file_atomic(self.path, key_file)
        logger.debug("Saved section [%s] to %s", section, self.path)

    def remove_section(self, section: str) -> None:
        erase_section(self.path, section)

    def ensure_default_section(self) -> Configuration:
        """Return the ``[default]`` configuration, creating the file if needed.

        A missing file is created with hard-coded defaults. An unreadable
        file, or one without a default section, falls back to hard-coded
        defaults in memory and is left untouched on disk.
        """

        if not self.path.exists():
            cfg = hard_default_configuration()
            key_file = KeyFile()
            configuration_to_section(key_file, DEFAULT_SECTION, cfg)
            write_key_file_atomic(self.path, key_file)
            logger.info(
                "Configuration file (%s) with [%s] configuration has been created.",
                self.path,
                DEFAULT_SECTION,
            )
            return cfg

        try:
            return self.load(DEFAULT_SECTION).configuration
        except (ConfigParseError, SectionNotFoundError) as exc:
            logger.warning("Falling back to built-in defaults: %s", exc)
            return hard_default_configuration()
