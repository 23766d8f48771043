"""
Callable tool registry for the audit agent

Each tool pairs a pydantic input contract with an engine primitive.
Arguments are validated at this boundary before anything runs.
"""

import logging
from typing import Any, Callable, Dict, List, NamedTuple, Type

from pydantic import BaseModel, ValidationError

from .models import (
    CalculateDutiesInput,
    CheckTradeRemediesInput,
    LookupHTSCodeInput,
    RiskScoreInput,
)
from .risk import calculate_risk_score
from ..common.errors import InvalidInput
from ..common.models import CamelModel
from ..common.service_factory import ServiceFactory
from ..duty_calculator.calculator import calculate_from_request

logger = logging.getLogger(__name__)

LOOKUP_RESULT_LIMIT = 15


class ToolSpec(NamedTuple):
    """Registered tool"""

    description: str
    input_model: Type[BaseModel]
    handler: Callable[[Any], CamelModel]


def _lookup_hts_code(args: LookupHTSCodeInput) -> CamelModel:
    service = ServiceFactory.get_classification_service()
    return service.lookup(args.keyword, limit=LOOKUP_RESULT_LIMIT)


def _check_trade_remedies(args: CheckTradeRemediesInput) -> CamelModel:
    resolver = ServiceFactory.get_remedy_resolver()
    return resolver.resolve_remedies(
        args.country_of_origin, args.hts_code, args.product_description
    )


TOOLS: Dict[str, ToolSpec] = {
    "lookup_hts_code": ToolSpec(
        description=(
            "Search the USITC Harmonized Tariff Schedule database for HTS code "
            "details including duty rates (inherited from parent headings), "
            "descriptions, and special provisions."
        ),
        input_model=LookupHTSCodeInput,
        handler=_lookup_hts_code,
    ),
    "check_trade_remedies": ToolSpec(
        description=(
            "Check if a product from a specific country of origin is subject to "
            "Section 301 or Section 232 additional duties, and report free trade "
            "agreement eligibility."
        ),
        input_model=CheckTradeRemediesInput,
        handler=_check_trade_remedies,
    ),
    "calculate_expected_duties": ToolSpec(
        description=(
            "Calculate the expected duties and fees for a U.S. import: general "
            "duty, Section 301/232, AD/CVD, MPF, HMF and total landed cost."
        ),
        input_model=CalculateDutiesInput,
        handler=calculate_from_request,
    ),
    "calculate_risk_score": ToolSpec(
        description=(
            "Calculate the overall compliance risk score (0-100) from the number "
            "of error, warning and info findings."
        ),
        input_model=RiskScoreInput,
        handler=calculate_risk_score,
    ),
}


def get_tool_schemas() -> List[Dict[str, Any]]:
    """
    Describe every registered tool

    Returns:
        List of {name, description, input_schema} with camelCase properties
    """
    return [
        {
            "name": name,
            "description": tool.description,
            "input_schema": tool.input_model.model_json_schema(by_alias=True),
        }
        for name, tool in TOOLS.items()
    ]


def invoke_tool(name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate arguments against the tool contract and run it

    Args:
        name: Registered tool name
        arguments: Raw tool-call arguments (camelCase or snake_case keys)

    Returns:
        Tool result as a camelCase dictionary

    Raises:
        InvalidInput: Unknown tool or arguments failing validation
        UpstreamUnavailable: lookup_hts_code could not reach the database
    """
    tool = TOOLS.get(name)
    if tool is None:
        raise InvalidInput(f"Unknown tool: {name}")

    try:
        args = tool.input_model.model_validate(arguments or {})
    except ValidationError as e:
        logger.warning(f"Rejected arguments for tool {name}: {e.error_count()} errors")
        raise InvalidInput(f"Invalid arguments for {name}: {e}") from e

    logger.info(f"Invoking tool {name}")
    return tool.handler(args).to_dict()
