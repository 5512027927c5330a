"""Logging utility for geonav"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('geonav')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

# Messages already emitted by warn_once in this process
_WARNINGS: Set[str] = set()


def warn_once(warning: str):
    """Logs a warning on the geonav logger the first time it is seen"""
    if warning in _WARNINGS:
        return

    LOGGER.warning(warning)
    _WARNINGS.add(warning)
