"""
Energy Schemas
==============

Pydantic models for device and energy plan request validation.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class CreateDeviceRequest(BaseModel):
    """Request model for registering a device"""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=100, description="Device name")
    power_usage_watts: float = Field(..., ge=0, allow_inf_nan=False, description="Rated draw in watts")
    is_on: StrictBool = Field(default=False, description="Initial power state")


class ToggleDeviceRequest(BaseModel):
    """Request model for switching a device on or off"""

    model_config = ConfigDict(extra="forbid")

    is_on: StrictBool = Field(..., description="Target power state")


class UpdateEnergyLimitRequest(BaseModel):
    """Request model for changing the plan's daily limit.

    Any finite number is accepted, including zero and negatives.
    """

    model_config = ConfigDict(extra="forbid")

    daily_limit_kwh: float = Field(..., allow_inf_nan=False, description="New daily limit in kWh")
