"""
Duty Calculator Service - landed cost breakdown for U.S. entries
"""

from .calculator import calculate_duties, calculate_from_request
from .models import DutyBreakdown, DutyCalculationRequest, DutyComponent

__all__ = [
    "calculate_duties",
    "calculate_from_request",
    "DutyBreakdown",
    "DutyCalculationRequest",
    "DutyComponent",
]
