"""
FastAPI application exposing the tariff engine
"""

from fastapi import FastAPI

from .routes import router

app = FastAPI(
    title="HTS Classification & Duty Engine",
    description="Heuristic HTS classification, trade remedy lookup and landed cost calculation",
    version="0.1.0",
)
app.include_router(router)
