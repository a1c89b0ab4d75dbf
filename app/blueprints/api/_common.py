"""
Blueprint Common Utilities
==========================

Shared helper functions for all API blueprints.
Import these instead of duplicating helper code in each blueprint.

Usage:
    from app.blueprints.api._common import (
        get_container, get_json, parse_body, success,
        get_device_service, get_energy_monitor_service,
    )
"""
from __future__ import annotations

from typing import Type, TypeVar

from flask import current_app, request
from pydantic import BaseModel

from app.domain.exceptions import ValidationError
from app.utils.http import success_response

ModelT = TypeVar("ModelT", bound=BaseModel)

# ============================================================================
# CONTAINER ACCESS
# ============================================================================


def get_container():
    """
    Get the service container from Flask app config.

    Returns:
        ServiceContainer: The application service container

    Raises:
        RuntimeError: If container is not configured
    """
    container = current_app.config.get("CONTAINER")
    if not container:
        raise RuntimeError("ServiceContainer not found in app config")
    return container


# ============================================================================
# REQUEST HELPERS
# ============================================================================


def get_json() -> dict:
    """
    Get JSON request body with silent failure.

    Returns:
        dict: Parsed JSON body or empty dict if not available
    """
    return request.get_json(silent=True) or {}


def parse_body(model: Type[ModelT]) -> ModelT:
    """Validate the JSON body against a pydantic model.

    Raises:
        ValidationError: With pydantic's error list in ``detail["errors"]``.
    """
    from pydantic import ValidationError as PydanticValidationError

    try:
        return model.model_validate(get_json())
    except PydanticValidationError as ve:
        raise ValidationError(
            "Invalid request",
            detail={"errors": ve.errors(include_url=False, include_context=False)},
        ) from ve


# ============================================================================
# RESPONSE HELPERS
# ============================================================================


def success(data: dict | list | None = None, status: int = 200, *, message: str | None = None):
    """
    Standard success response wrapper.

    Returns:
        Flask Response with format: {"ok": true, "data": ..., "error": null}
    """
    return success_response(data, status, message=message)


# ============================================================================
# SERVICE ACCESSORS
# ============================================================================


def get_device_service():
    """Get device control service from container."""
    return get_container().device_service


def get_energy_monitor_service():
    """Get energy monitor service from container."""
    return get_container().energy_monitor_service


def get_notifications_service():
    """Get notifications service from container."""
    return get_container().notifications_service
