"""
Pydantic models for Trade Remedy Service
"""

import json
import logging
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

from ..common.models import CamelModel
from .config import (
    ALUMINUM_HEADINGS,
    ALUMINUM_RATE,
    COUNTRY_NAMES,
    FTA_PARTNERS,
    SECTION_232_AUTHORITY,
    SECTION_301_AUTHORITY,
    SECTION_301_COUNTRY,
    SECTION_301_DEFAULT_LIST,
    SECTION_301_DEFAULT_PROVISION,
    SECTION_301_DEFAULT_RATE,
    SECTION_301_TEXTILE_CHAPTERS,
    SECTION_301_TEXTILE_LIST,
    SECTION_301_TEXTILE_PROVISION,
    SECTION_301_TEXTILE_RATE,
    STEEL_HEADINGS,
    STEEL_RATE,
)

logger = logging.getLogger(__name__)


class Remedy(CamelModel):
    """One additional duty program applicable to an entry"""

    type: str
    rate: float
    authority: str
    list: Optional[str] = None
    hts_provision: Optional[str] = None
    note: Optional[str] = None


class TradeRemedyResult(CamelModel):
    """Response from resolve_remedies()"""

    country_of_origin: str
    country_name: str
    hts_code: str
    product_description: str = ""
    remedies: List[Remedy] = Field(default_factory=list)
    remedies_apply: bool = False
    free_trade_agreements: List[str] = Field(default_factory=list)
    fta_eligible: bool = False


class RemedyTables(BaseModel):
    """Closed lookup tables consulted by the trade remedy resolver"""

    model_config = ConfigDict(frozen=True)

    section301_country: str = SECTION_301_COUNTRY
    section301_authority: str = SECTION_301_AUTHORITY
    section301_textile_chapters: List[str] = Field(
        default_factory=lambda: list(SECTION_301_TEXTILE_CHAPTERS)
    )
    section301_textile_rate: float = SECTION_301_TEXTILE_RATE
    section301_textile_list: str = SECTION_301_TEXTILE_LIST
    section301_textile_provision: str = SECTION_301_TEXTILE_PROVISION
    section301_default_rate: float = SECTION_301_DEFAULT_RATE
    section301_default_list: str = SECTION_301_DEFAULT_LIST
    section301_default_provision: str = SECTION_301_DEFAULT_PROVISION

    section232_authority: str = SECTION_232_AUTHORITY
    steel_headings: List[str] = Field(default_factory=lambda: list(STEEL_HEADINGS))
    steel_rate: float = STEEL_RATE
    aluminum_headings: List[str] = Field(
        default_factory=lambda: list(ALUMINUM_HEADINGS)
    )
    aluminum_rate: float = ALUMINUM_RATE

    fta_partners: Dict[str, List[str]] = Field(
        default_factory=lambda: {name: list(c) for name, c in FTA_PARTNERS.items()}
    )
    country_names: Dict[str, str] = Field(default_factory=lambda: dict(COUNTRY_NAMES))

    @classmethod
    def from_json(cls, file_path: Path) -> "RemedyTables":
        """
        Load remedy tables from a JSON file (missing keys keep defaults)

        Args:
            file_path: Path to JSON table file

        Returns:
            RemedyTables instance

        Raises:
            FileNotFoundError: If JSON file doesn't exist
            json.JSONDecodeError: If JSON is malformed
            ValueError: If the file is not a JSON object or fails validation
        """
        if not file_path.exists():
            raise FileNotFoundError(f"Trade remedy table file not found: {file_path}")

        logger.info(f"Loading trade remedy tables from: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON: {e}")
            raise

        if not isinstance(data, dict):
            raise ValueError("Trade remedy tables must be a JSON object")

        return cls.model_validate(data)
