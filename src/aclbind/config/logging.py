"""Logging setup for the aclbind command line."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send log records to stderr, leaving stdout for the printed rule.

    The CLI passes ``logging.DEBUG`` for ``--verbose`` to show each pipeline step.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
