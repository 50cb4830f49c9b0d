"""Logging for the ``nutrifit`` logger tree.

Records carry the current request id (``-`` outside a request) so a single
request can be followed across gateway and handler log lines.
"""

from __future__ import annotations

import logging

from flask import g, has_request_context

LOGGER_NAME = "nutrifit"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        rid = getattr(g, "request_id", None) if has_request_context() else None
        record.request_id = rid or "-"
        return True


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    # Avoid duplicate attachment when the factory runs more than once (tests)
    if not any(isinstance(f, RequestIdFilter) for h in log.handlers for f in h.filters):
        h = logging.StreamHandler()
        h.addFilter(RequestIdFilter())
        h.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(h)
    log.setLevel(level)
    return log


__all__ = ["RequestIdFilter", "configure_logging"]
