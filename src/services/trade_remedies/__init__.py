"""
Trade Remedy Service - Section 301/232 surcharges and FTA eligibility
"""

from .models import Remedy, RemedyTables, TradeRemedyResult
from .resolver import TradeRemedyResolver

__all__ = [
    "Remedy",
    "RemedyTables",
    "TradeRemedyResult",
    "TradeRemedyResolver",
]
