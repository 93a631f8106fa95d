from __future__ import annotations

import logging
import shutil

from gtkterm.core.logging_utils import log_throttled

from .paths import ConfigPaths, resolve_config_paths


logger = logging.getLogger(__name__)


def migrate_legacy_config(paths: ConfigPaths | None = None) -> None:
    """Move the legacy home-directory file to the XDG location and back it up.

    The old location was $HOME/.gtktermrc; the new one is
    $XDG_CONFIG_HOME/.gtktermrc. If the new file exists it wins. Afterwards the
    current file is copied to the versioned backup path, replacing any older
    backup.

    Best-effort: failures are logged at debug level and never raised.
    """

    if paths is None:
        paths = resolve_config_paths()

    current = paths.current
    legacy = paths.legacy

    if not current.exists() and legacy.exists() and legacy != current:
        try:
            current.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(legacy), str(current))
            logger.info("Moved configuration file %s -> %s", legacy, current)
        except OSError as exc:
            log_throttled(
                logger,
                "config_migration.move_legacy",
                interval_s=60,
                level=logging.DEBUG,
                msg=f"Failed to migrate {legacy} -> {current}",
                exc=exc,
            )

    if not current.exists():
        return

    try:
        paths.backup.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(current, paths.backup)
    except OSError as exc:
        log_throttled(
            logger,
            "config_migration.backup",
            interval_s=60,
            level=logging.DEBUG,
            msg=f"Failed to back up {current} -> {paths.backup}",
            exc=exc,
        )
