"""Console logging setup for scripts using `remote_om`."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
HANDLER_NAME = "remote_om.console"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Attach a console handler to the `remote_om` logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("remote_om")
    logger.setLevel(level)
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
