"""
Logging for apptimeline.

The aggregator logs a summary of each put call at INFO, every rejected
submission at WARNING, and record creation or merge at DEBUG. The codecs log
what they encode at DEBUG. The codec factory logs codec creation at DEBUG and
codec registration at INFO.
The domain records do not log. Call `setup_logging()` once at startup; it
routes everything to stdout at DEBUG when `APPTIMELINE_DEBUG` is set, INFO
otherwise.
"""
import logging
import sys

from apptimeline.infrastructure.config.settings import get_settings


def setup_logging():
    """Install a stdout handler on the root logger"""
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. `get_logger(__name__)`"""
    return logging.getLogger(name)
