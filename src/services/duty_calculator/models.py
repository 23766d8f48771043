"""
Pydantic models for Duty Calculator Service
"""

from pydantic import Field
from typing import Literal, Optional

from ..common.models import CamelModel


class DutyCalculationRequest(CamelModel):
    """Input of the duty calculation capability"""

    entered_value: float = Field(..., ge=0, description="Entered value in USD")
    general_duty_rate_percent: float = Field(..., ge=0)
    section301_rate_percent: float = Field(0.0, ge=0)
    section232_rate_percent: float = Field(0.0, ge=0)
    ad_cvd_rate_percent: float = Field(0.0, ge=0)
    shipping_method: Literal["ocean", "air", "land"]


class DutyComponent(CamelModel):
    """One duty or fee line"""

    rate_percent: float
    amount: float
    applicable: bool = True
    note: Optional[str] = None


class DutyBreakdown(CamelModel):
    """Full landed cost breakdown"""

    entered_value: float
    shipping_method: str
    general_duty: DutyComponent
    section301: DutyComponent
    section232: DutyComponent
    ad_cvd: DutyComponent
    mpf: DutyComponent
    hmf: DutyComponent
    total_duties: float
    effective_duty_rate: Optional[float] = Field(
        None, description="Percent of entered value, None when entered value is 0"
    )
    effective_rate_available: bool = True
    total_landed_cost: float
