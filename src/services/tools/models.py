"""
Pydantic input/output contracts for the callable tools
"""

from pydantic import Field
from typing import Literal, Optional

from ..common.models import CamelModel
from ..duty_calculator.models import DutyCalculationRequest


class LookupHTSCodeInput(CamelModel):
    """Input of lookup_hts_code"""

    keyword: str = Field(
        ...,
        min_length=1,
        description="HTS code or product keyword to search for in the USITC database",
    )


class CheckTradeRemediesInput(CamelModel):
    """Input of check_trade_remedies"""

    country_of_origin: str = Field(
        ..., min_length=2, description="Two-letter country code, e.g. CN for China"
    )
    hts_code: str = Field(..., min_length=2, description="The 8-10 digit HTS code to check")
    product_description: str = Field(
        "", description="Brief product description for context"
    )


class CalculateDutiesInput(DutyCalculationRequest):
    """Input of calculate_expected_duties (HMF only applies to ocean shipments)"""


class RiskScoreInput(CamelModel):
    """Input of calculate_risk_score"""

    error_count: int = Field(..., ge=0, description="Number of error-severity findings")
    warning_count: int = Field(..., ge=0, description="Number of warning-severity findings")
    info_count: int = Field(..., ge=0, description="Number of info/verified findings")
    notes: Optional[str] = Field(None, description="Additional context")


class RiskScoreResult(CamelModel):
    """Overall compliance risk score of an audit"""

    risk_score: int
    level: Literal["Low", "Medium", "High"]
    error_count: int
    warning_count: int
    info_count: int
    total_checks: int
    notes: str = ""
    recommendation: str
