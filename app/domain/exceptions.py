"""Centralized exception hierarchy for the energy monitor.

All domain and service exceptions inherit from :class:`EnergyMonitorError` so
that callers can catch a single base class when they need a broad safety net,
yet still match on specific subclasses where narrower handling is appropriate.

Blueprint-level error handling (see ``app/utils/http.safe_route``) maps these
to the correct HTTP status codes automatically.

Hierarchy
---------
::

    EnergyMonitorError (base: maps to 500)
    ├── ValidationError          (400: bad input from caller)
    │   └── InvalidArgumentError (404: caller referenced an unknown entity)
    ├── NotFoundError            (404: entity does not exist)
    ├── ServiceError             (500: business-logic failure)
    │   └── RepositoryError      (500: database / persistence)
    └── ConfigurationError       (500: missing / invalid config)
"""

from __future__ import annotations


class EnergyMonitorError(Exception):
    """Base exception for all energy monitor errors.

    Parameters
    ----------
    message:
        Human-readable description (logged server-side, **not** leaked to
        the HTTP client unless the exception class opts in).
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    http_status: int = 500

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


# ── Client errors (4xx) ──────────────────────────────────────────────


class ValidationError(EnergyMonitorError):
    """Caller supplied invalid or incomplete input (HTTP 400)."""

    http_status: int = 400


class InvalidArgumentError(ValidationError, ValueError):
    """Caller passed a reference to something that does not exist.

    Raised by ``DeviceService.toggle_device`` for an unknown device id. Also a
    ``ValueError`` so plain-Python callers can catch it without importing
    this module.
    """

    http_status: int = 404


class NotFoundError(EnergyMonitorError):
    """Requested entity does not exist (HTTP 404)."""

    http_status: int = 404


# ── Server errors (5xx) ──────────────────────────────────────────────


class ServiceError(EnergyMonitorError):
    """Business-logic failure in a service method (HTTP 500)."""

    http_status: int = 500


class RepositoryError(ServiceError):
    """Database / persistence layer failure (HTTP 500)."""

    http_status: int = 500


class ConfigurationError(EnergyMonitorError):
    """Missing or invalid application configuration (HTTP 500)."""

    http_status: int = 500
