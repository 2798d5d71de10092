"""Command entry point that starts the engine application."""

from __future__ import annotations

import sys
from pathlib import Path

from .application import Application
from .logger import Logger


def main(argv: list[str] | None = None) -> int:
    """Run the application next to the program; return 0, or -1 on an error."""
    if argv is None:
        argv = sys.argv
    program = argv[0] if argv else ""
    try:
        with Application(Path(program).parent) as app:
            app.run()
    except Exception as exc:
        Logger.error("EXCEPTION: %s", exc)
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())