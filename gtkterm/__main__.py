"""`python -m gtkterm` entrypoint.

For installed usage, prefer the `gtkterm-config` console script.
"""

from __future__ import annotations

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
