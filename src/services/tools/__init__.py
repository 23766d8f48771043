"""
Callable tools - schema-validated engine primitives for the audit agent
"""

from .registry import TOOLS, get_tool_schemas, invoke_tool
from .risk import calculate_risk_score

__all__ = [
    "TOOLS",
    "calculate_risk_score",
    "get_tool_schemas",
    "invoke_tool",
]
