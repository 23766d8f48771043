"""
HTS Lookup Service - USITC keyword search and rate inheritance
"""

from .client import TariffLookupClient
from .models import Footnote, LookupResult, ResolvedCandidate, TariffRecord
from .rates import extract_section301_note, parse_duty_rate, resolve_rates

__all__ = [
    "TariffLookupClient",
    "Footnote",
    "LookupResult",
    "ResolvedCandidate",
    "TariffRecord",
    "extract_section301_note",
    "parse_duty_rate",
    "resolve_rates",
]
