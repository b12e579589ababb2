"""
Logging utilities

Context-aware logger adapter and request tracking context variables.
Handler and formatter configuration lives in hostelia.config.logging.
"""

import logging
from contextvars import ContextVar
from typing import Any, MutableMapping, Optional, Tuple

# Current request id, set by RequestIDMiddleware
request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)


class ContextLogger(logging.LoggerAdapter):
    """
    Logger that attaches bound fields to every record as ``extra``.

    Fields passed with a single call win over bound ones.
    """

    def __init__(self, logger: logging.Logger):
        super().__init__(logger, {})

    def add_context(self, **fields: Any) -> "ContextLogger":
        self.extra.update(fields)
        return self

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs['extra'] = {**self.extra, **(kwargs.get('extra') or {})}
        return msg, kwargs


def get_logger(name: Optional[str] = None) -> ContextLogger:
    """Logger for ``name``, under the package logger by default."""
    return ContextLogger(logging.getLogger(name or "hostelia"))


__all__ = [
    'get_logger',
    'ContextLogger',
    'request_id',
]
