"""
Pydantic models for HTS Lookup Service
"""

import logging
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional

from ..common.models import CamelModel

logger = logging.getLogger(__name__)


class Footnote(BaseModel):
    """Footnote attached to an HTS entry"""

    model_config = ConfigDict(frozen=True)

    marker: str = ""
    value: str = ""
    type: str = ""
    columns: List[str] = Field(default_factory=list)

    @field_validator("marker", "value", "type", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> str:
        return "" if v is None else str(v)


class TariffRecord(BaseModel):
    """Single raw entry returned by the USITC keyword search"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field("", alias="htsno", description="HTS code, empty for headers")
    description: str = Field("", description="Official classification description")
    indent_level: int = Field(0, alias="indent", description="Hierarchy Level")
    general_rate: str = Field("", alias="general")
    special_rate: str = Field("", alias="special")
    other_rate: str = Field("", alias="other")
    units: List[str] = Field(default_factory=list)
    footnotes: List[Footnote] = Field(default_factory=list)
    statistical_suffix: str = Field("", alias="statisticalSuffix")
    additional_duties: Optional[str] = Field(None, alias="additionalDuties")

    @field_validator(
        "code",
        "description",
        "general_rate",
        "special_rate",
        "other_rate",
        "statistical_suffix",
        mode="before",
    )
    @classmethod
    def strip_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("indent_level", mode="before")
    @classmethod
    def normalize_indent(cls, v: Any) -> int:
        # The search endpoint sends indent as a string
        if v is None or v == "":
            return 0
        try:
            indent = int(v)
        except (TypeError, ValueError):
            logger.warning(f"Could not convert indent to int: {v!r}")
            return 0
        return max(indent, 0)

    @field_validator("units", mode="before")
    @classmethod
    def normalize_units(cls, v: Any) -> List[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v else []
        return [str(unit) for unit in v]

    @field_validator("footnotes", mode="before")
    @classmethod
    def normalize_footnotes(cls, v: Any) -> List[Any]:
        return v or []


class ResolvedCandidate(CamelModel):
    """HTS entry with rates inherited from its rated ancestors"""

    hts_code: str
    description: str
    general_rate: str = ""
    special_rate: str = ""
    other_rate: str = ""
    units: List[str] = Field(default_factory=list)
    section301_note: Optional[str] = None
    indent_level: int = 0


class LookupResult(CamelModel):
    """Result of a direct single-keyword lookup"""

    keyword: str
    result_count: int
    results: List[ResolvedCandidate] = Field(default_factory=list)
