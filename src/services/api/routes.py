"""
HTTP routes for classification, HTS search, duties and trade remedies
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from ..classification.config import CLASSIFICATION_FAILED_MESSAGE
from ..classification.keywords import build_keywords
from ..classification.models import ClassificationRequest
from ..common.errors import InvalidInput, UpstreamUnavailable
from ..common.service_factory import ServiceFactory
from ..duty_calculator.calculator import calculate_from_request
from ..duty_calculator.models import DutyBreakdown, DutyCalculationRequest
from ..tools.models import CheckTradeRemediesInput
from ..tools.registry import TOOLS, get_tool_schemas, invoke_tool
from ..trade_remedies.models import TradeRemedyResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tariff"])


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


@router.get("/health")
def health() -> Dict[str, bool]:
    return {"ok": True}


@router.post("/classify")
def classify(request: ClassificationRequest):
    """Classify a product description for a country of origin."""
    service = ServiceFactory.get_classification_service()

    try:
        response = service.classify(request.product_description, request.country_of_origin)
    except InvalidInput:
        return _error(400, "Missing productDescription or countryOfOrigin")
    except Exception:
        logger.exception("Classification error")
        return _error(
            500,
            CLASSIFICATION_FAILED_MESSAGE,
            keywords=build_keywords(request.product_description),
        )

    return response.to_dict()


@router.get("/hts/search")
def search_hts(query: Optional[str] = None):
    """Search HTS codes, most specific first."""
    if not query:
        return _error(400, "Missing 'query' parameter")

    service = ServiceFactory.get_classification_service()
    try:
        response = service.search_hts(query)
    except InvalidInput as e:
        return _error(400, str(e))
    except UpstreamUnavailable as e:
        logger.error(f"HTS search error: {e}")
        return _error(502, "Failed to search HTS database")

    return response.to_dict()


@router.get("/hts-proxy")
def hts_proxy(keyword: Optional[str] = None):
    """Pass a keyword search through to the USITC API."""
    if not keyword:
        return _error(400, "Missing 'keyword' parameter")

    client = ServiceFactory.get_lookup_client()
    try:
        data = client.search_raw(keyword)
    except InvalidInput as e:
        return _error(400, str(e))
    except UpstreamUnavailable as e:
        if e.status_code is not None:
            return _error(e.status_code, f"USITC API error: {e.status_code}")
        logger.error(f"USITC proxy error: {e}")
        return _error(502, "Failed to fetch from USITC")

    return JSONResponse(
        content=data,
        headers={"Cache-Control": "public, s-maxage=3600, stale-while-revalidate=86400"},
    )


@router.post("/duties/calculate", response_model=DutyBreakdown)
def calculate_duties(request: DutyCalculationRequest) -> DutyBreakdown:
    """Landed cost breakdown for an entry."""
    return calculate_from_request(request)


@router.post("/trade-remedies", response_model=TradeRemedyResult)
def check_trade_remedies(request: CheckTradeRemediesInput):
    """Additional duties and FTA eligibility for an origin and HTS code."""
    resolver = ServiceFactory.get_remedy_resolver()
    try:
        return resolver.resolve_remedies(
            request.country_of_origin, request.hts_code, request.product_description
        )
    except InvalidInput as e:
        return _error(400, str(e))


@router.get("/tools")
def list_tools():
    return get_tool_schemas()


@router.post("/tools/{name}")
def call_tool(name: str, arguments: Dict[str, Any] = Body(...)):
    """Run a registered tool with validated arguments."""
    if name not in TOOLS:
        return _error(404, f"Unknown tool: {name}")

    try:
        return invoke_tool(name, arguments)
    except InvalidInput as e:
        return _error(422, str(e))
    except UpstreamUnavailable as e:
        logger.error(f"Tool {name} upstream error: {e}")
        return _error(502, str(e), results=[])
