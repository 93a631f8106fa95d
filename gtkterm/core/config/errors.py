from __future__ import annotations

from pathlib import Path


class ConfigError(RuntimeError):
    """Base class for configuration store failures."""


class SectionNotFoundError(ConfigError):
    def __init__(self, section: str, path: Path | str | None = None) -> None:
        self.section = section
        self.path = path
        super().__init__(f'No section "{section}" in configuration file')


class ConfigParseError(ConfigError):
    def __init__(self, message: str, *, path: Path | str | None = None, line: int | None = None) -> None:
        self.path = path
        self.line = line
        where = ""
        if path is not None:
            where = f"{path}"
            if line is not None:
                where += f":{line}"
            where += ": "
        super().__init__(f"{where}{message}")


class ConfigIOError(ConfigError):
    pass
