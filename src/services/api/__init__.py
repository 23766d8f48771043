"""
HTTP API - FastAPI surface of the tariff engine
"""

from .app import app

__all__ = ["app"]
