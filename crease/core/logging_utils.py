"""Logging utilities for crease.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All crease code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'crease'


def _ensure_crease_root() -> logging.Logger:
    """Ensure the 'crease' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'crease' logger.
    """
    root = logging.getLogger(_ROOT_NAME)
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in root.handlers)
    if not has_non_null:
        # NullHandlers come from the package __init__; they would swallow output
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Configure the level of the 'crease' logger family.

    This does NOT modify the process root logger.
    """
    root = _ensure_crease_root()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'crease' namespace.

    Without a level the logger is left at NOTSET so it inherits whatever
    configure_logging() set on the 'crease' parent. Merely obtaining a
    logger does not attach any handler.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
