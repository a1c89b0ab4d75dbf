"""
Schemas Module
==============

This module provides Pydantic models for request validation.
Schemas ensure data integrity and provide automatic validation.
"""

from app.schemas.energy import CreateDeviceRequest, ToggleDeviceRequest, UpdateEnergyLimitRequest

__all__ = [
    "CreateDeviceRequest",
    "ToggleDeviceRequest",
    "UpdateEnergyLimitRequest",
]
