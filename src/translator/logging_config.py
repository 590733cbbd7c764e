"""Logging configuration for the command-line tool."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False):
    """Configure root logging for a CLI run.

    Diagnostics are emitted at INFO/DEBUG, so they only show with ``verbose``.

    Args:
        verbose: Log everything down to DEBUG instead of warnings only
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
