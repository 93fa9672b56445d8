"""
EcoTravel - Logging setup.

Library modules only create module loggers; entry points call setup_logging()
once to attach a stderr handler.
"""

import logging
import sys


def setup_logging(level: str | int = logging.INFO, verbose: bool = False) -> None:
    """Setup logging with visible output."""
    if verbose:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
