"""
Purpose: Logging setup for the server process.
Dependencies: logging, core/config.py.
Ext Hooks: File handler for persistent server logs.
"""

import logging
import sys

from core.config import LOG_LEVEL


def setup_logging(level=LOG_LEVEL):
    """
    Configure the root logger for the server process.
    Library modules only create loggers; handlers are installed here.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
