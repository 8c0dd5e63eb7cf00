from __future__ import annotations

import logging
import sys

from .logging import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Console entry point: configure logging and dispatch to the Typer CLI."""
    if argv is None:
        argv = sys.argv[1:]

    configure_logging()

    try:
        from .cli import run_cli
        run_cli(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.error("CLI error: %s", e, exc_info=True)
        return 1
