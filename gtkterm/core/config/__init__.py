"""GTKTerm configuration store.

Loads, validates and saves named sections of ``.gtktermrc``.
"""

from __future__ import annotations

from .defaults import DEFAULT_SECTION, hard_default_configuration
from .eraser import erase_section
from .errors import ConfigError, ConfigIOError, ConfigParseError, SectionNotFoundError
from .font import FontDescription, parse_font_description
from .formatting import format_configuration_text
from .keys import ConfigKey
from .macros import add_macro, decode_macros, encode_macros
from .migration import migrate_legacy_config
from .model import Color, Configuration, FlowControl, Macro, Parity, PortConfig, TerminalConfig
from .paths import ConfigPaths, config_file_path, resolve_config_paths
from .store import SectionStore
from .validate import ValidationReport, ValidationWarning, validate_configuration


__all__ = [
    "Color",
    "ConfigError",
    "ConfigIOError",
    "ConfigKey",
    "ConfigParseError",
    "ConfigPaths",
    "Configuration",
    "DEFAULT_SECTION",
    "FlowControl",
    "FontDescription",
    "Macro",
    "Parity",
    "PortConfig",
    "SectionNotFoundError",
    "SectionStore",
    "TerminalConfig",
    "ValidationReport",
    "ValidationWarning",
    "add_macro",
    "config_file_path",
    "decode_macros",
    "encode_macros",
    "erase_section",
    "format_configuration_text",
    "hard_default_configuration",
    "migrate_legacy_config",
    "parse_font_description",
    "resolve_config_paths",
    "validate_configuration",
]
