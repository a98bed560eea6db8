"""Logging configuration for command-line runs."""

from __future__ import annotations

import logging
import sys


def set_up_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout stays free for the run summary.

    Args:
        verbose: Emit ``DEBUG`` records instead of ``INFO`` and above.
    """

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[handler],
        force=True,
    )
