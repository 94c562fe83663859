"""
Input validation schemas using Pydantic for production figures and adjustments.
"""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from prodplan.utilities.constants import DEFAULT_INITIAL_PRODUCTION


def _numeric_before(v):
    """Reject booleans and pass floats through their shortest repr so 0.1 stays 0.1."""
    if isinstance(v, bool):
        raise ValueError('Boolean is not a numeric quantity')
    if isinstance(v, float):
        return str(v)
    if isinstance(v, str):
        return v.strip()
    return v


class AdjustmentInput(BaseModel):
    """Schema for adjustment input validation."""
    model_config = ConfigDict(extra='ignore')

    amount: Decimal = Field(..., allow_inf_nan=False)
    reason: str = ""

    @field_validator('amount', mode='before')
    @classmethod
    def validate_amount(cls, v):
        return _numeric_before(v)

    @field_validator('reason', mode='before')
    @classmethod
    def strip_reason(cls, v):
        """Remove leading/trailing whitespace; None means no reason."""
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        return v


class ProductionPlanInput(BaseModel):
    """Schema for the initial production baseline."""
    initial_production: Decimal = Field(DEFAULT_INITIAL_PRODUCTION, allow_inf_nan=False)

    @field_validator('initial_production', mode='before')
    @classmethod
    def validate_initial_production(cls, v):
        if v is None:
            return DEFAULT_INITIAL_PRODUCTION
        return _numeric_before(v)
