import logging
import sys

from storeadmin.config import settings


def get_logger(name: str, tag: str) -> logging.Logger:
    """Module logger writing `[TAG] message` lines to stdout."""
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(f"[{tag}] %(levelname)s %(message)s"))
        log.addHandler(h)
    return log
