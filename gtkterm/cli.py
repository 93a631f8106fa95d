"""Command line entry point for the configuration store.

This module owns the startup sequence (logging, legacy migration, default
section) and then runs the requested configuration command.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable

from .core.config import (
    DEFAULT_SECTION,
    ConfigError,
    SectionStore,
    format_configuration_text,
    migrate_legacy_config,
    resolve_config_paths,
)


logger = logging.getLogger(__name__)


def configure_logging(*, debug: bool = False) -> None:
    """Configure root logging for the CLI.

    If callers already configured logging handlers, we don't override them.
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if (debug or os.environ.get("GTKTERM_DEBUG")) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtkterm-config",
        description="Inspect and maintain GTKTerm configuration sections.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_SECTION,
        metavar="SECTION",
        help="Section to load (default: %(default)s)",
    )
    parser.add_argument("-S", "--show-config", action="store_true", help="Print the loaded section and exit")
    parser.add_argument("--list-sections", action="store_true", help="List sections in the configuration file")
    parser.add_argument("--save-as", metavar="SECTION", help="Save the loaded section under another name")
    parser.add_argument("--remove-section", metavar="SECTION", help="Remove a section from the configuration file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(debug=args.debug)

    paths = resolve_config_paths()
    migrate_legacy_config(paths)
    store = SectionStore(paths.current)

    try:
        configuration = store.ensure_default_section()

        if args.remove_section:
            store.remove_section(args.remove_section)
            logger.info("Removed section [%s] from %s", args.remove_section, store.path)
            return 0

        if args.list_sections:
            for name in store.sections():
                print(name)
            return 0

        if args.config != DEFAULT_SECTION:
            configuration = store.load(args.config).configuration

        if args.save_as:
            store.save(args.save_as, configuration)
            logger.info("Saved [%s] as [%s] in %s", args.config, args.save_as, store.path)

        if args.show_config:
            sys.stdout.write(format_configuration_text(args.config, configuration))

    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    return 0
