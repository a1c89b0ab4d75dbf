"""JSON response envelope for the energy API.

Every endpoint answers ``{"ok": bool, "data": ..., "error": ...}``. Failures
also carry a top-level ``message`` and, for client errors, the ``details``
attached to the raised :class:`~app.domain.exceptions.EnergyMonitorError`.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from flask import Response, jsonify

from app.domain.exceptions import EnergyMonitorError
from app.utils.time import iso_now

_log = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"


def _envelope(status: int, *, ok: bool, data: Any = None, error: dict | None = None, **extra: Any) -> Response:
    body: dict[str, Any] = {"ok": ok, "data": data, "error": error}
    body.update({key: value for key, value in extra.items() if value is not None})
    response = jsonify(body)
    response.status_code = status
    return response


def success_response(data: dict | list | None = None, status: int = 200, *, message: str | None = None) -> Response:
    return _envelope(status, ok=True, data=data, message=message)


def error_response(message: str, status: int = 400, *, details: dict | list | None = None) -> Response:
    error = {"message": message, "timestamp": iso_now()}
    return _envelope(status, ok=False, error=error, message=message, details=details or None)


def safe_route(context: str) -> Callable:
    """Turn exceptions raised by a route into error envelopes.

    Client errors (``http_status < 500``) echo the exception message and its
    ``detail``. Server errors and unexpected exceptions are logged with
    *context* and answered with a generic message.
    """

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Response:
            try:
                return fn(*args, **kwargs)
            except EnergyMonitorError as exc:
                if exc.http_status < 500:
                    return error_response(str(exc) or context, exc.http_status, details=exc.detail)
                _log.error("%s: %s", context, exc, exc_info=exc)
                return error_response(INTERNAL_ERROR_MESSAGE, exc.http_status)
            except Exception as exc:
                _log.error("%s: %s", context, exc, exc_info=exc)
                return error_response(INTERNAL_ERROR_MESSAGE, 500)

        return wrapper

    return decorator
