"""Logging for glidequery.

The builder traces fragment appends and built queries at DEBUG. The root
logger is configured once, from `settings.LOG_LEVEL`, the first time a
`Logger` is created.
"""

import logging
from typing import Optional

from glidequery.settings import settings as api_settings

_configured = False


def setup_global_logging(level: str = "INFO") -> None:
    """Configure the root logger once. Unknown level names fall back to INFO."""
    global _configured
    if _configured:
        return
    lvl = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=lvl if isinstance(lvl, int) else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    _configured = True


def get_logger(name: Optional[str] = None) -> "Logger":
    return Logger(name or __name__)


class Logger:
    """Debug-only tracer used by `QueryBuilder`.

    `is_enabled_for` lets callers skip rendering a fragment when DEBUG is off.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        if not _configured:
            setup_global_logging(api_settings.LOG_LEVEL)
        self._logger = logging.getLogger(name or __name__)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)
