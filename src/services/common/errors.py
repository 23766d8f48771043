"""
Error taxonomy shared by the tariff engine services
"""

from typing import Optional


class TariffEngineError(Exception):
    """Base class for tariff engine errors"""


class UpstreamUnavailable(TariffEngineError):
    """
    The external tariff database returned a non-success status or could
    not be reached (timeouts and connection errors included)
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidInput(TariffEngineError, ValueError):
    """Request input rejected before any work (or network call) is done"""
