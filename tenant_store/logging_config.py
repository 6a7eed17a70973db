from __future__ import annotations
import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging for tenant_store entry points.

    Library code only creates module loggers; this is called by the CLI
    (or by an embedding application that wants the same format). Existing
    root handlers are replaced. Returns a module logger for the caller.
    """
    log_level = logging.WARNING
    if level:
        resolved = logging.getLevelName(level.upper())
        if isinstance(resolved, int):
            log_level = resolved

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)
    logger.debug('Log level set to %s', logging.getLevelName(log_level))
    return logger
