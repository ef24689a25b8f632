# vaultkeep/app/core/logging.py
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("vaultkeep")

_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> None:
    """
    Attach the stream handler to the ``vaultkeep`` logger.

    Safe to call more than once (e.g. once per app instance in tests):
    the handler is only installed the first time, later calls just
    adjust the level.
    """
    logger.setLevel(level)
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
