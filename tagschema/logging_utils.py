import logging
from typing import IO, Optional

from tagschema.env import get_env

LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: Optional[int] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach a stream handler to the ``tagschema`` logger. When ``level`` is
    omitted it is read from ``TAGSCHEMA_LOG_LEVEL``."""
    if level is None:
        level = logging.getLevelName(get_env().TAGSCHEMA_LOG_LEVEL.upper())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("tagschema")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger
