# src/tasker/cli/main.py

"""
CLI entrypoint.

Initializes logging from settings, then hands argv to the click group.
Exactly one command runs per process.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..logging_setup import setup_logging
from .commands import cli

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    setup_logging(console_level=console_level, log_dir=settings.log_dir)
    logger.debug("Starting %s...", settings.app_name)

    # Reuse the same settings object instead of letting the group re-read them.
    cli.main(prog_name="tasker", obj=AppState(settings=settings))


if __name__ == "__main__":
    main()
