"""
Trade Remedy Resolver - Section 301/232 surcharges and FTA eligibility
"""

import logging
import re
from typing import List, Optional

from .config import TRADE_REMEDY_TABLES_PATH
from .models import Remedy, RemedyTables, TradeRemedyResult
from ..common.errors import InvalidInput

logger = logging.getLogger(__name__)


def _digits(hts_code: str) -> str:
    return re.sub(r"\D", "", hts_code or "")


class TradeRemedyResolver:
    """
    Deterministic table lookup of additional duties for an origin and code

    All matching rules are returned together. The two Section 301 branches
    are mutually exclusive; the steel and aluminum checks are independent
    of them.
    """

    def __init__(self, tables: Optional[RemedyTables] = None):
        """
        Initialize resolver

        Args:
            tables: Remedy tables (loaded from TRADE_REMEDY_TABLES_PATH or
                built-in defaults if not provided)
        """
        if tables is None:
            if TRADE_REMEDY_TABLES_PATH is not None:
                tables = RemedyTables.from_json(TRADE_REMEDY_TABLES_PATH)
            else:
                tables = RemedyTables()
        self.tables = tables

    def country_name(self, country_code: str) -> str:
        code = (country_code or "").strip().upper()
        return self.tables.country_names.get(code, code)

    def resolve_remedies(
        self, country_code: str, hts_code: str, description: str = ""
    ) -> TradeRemedyResult:
        """
        Determine additional duties and FTA eligibility

        Args:
            country_code: Two-letter country of origin
            hts_code: HTS code (dotted or plain digits)
            description: Product description (context only)

        Returns:
            TradeRemedyResult with all applicable remedies
        """
        country = (country_code or "").strip().upper()
        if not country:
            raise InvalidInput("Country of origin is required")

        digits = _digits(hts_code)
        if not digits:
            raise InvalidInput(f"HTS code has no digits: {hts_code!r}")

        chapter = digits[:2]
        heading = digits[:4]

        remedies = []
        remedies.extend(self._section301(country, chapter))
        remedies.extend(self._section232(heading))
        agreements = self._free_trade_agreements(country)

        logger.info(
            f"Trade remedies for {country} {hts_code}: "
            f"{len(remedies)} remedies, FTAs={agreements}"
        )

        return TradeRemedyResult(
            country_of_origin=country,
            country_name=self.country_name(country),
            hts_code=hts_code,
            product_description=description or "",
            remedies=remedies,
            remedies_apply=len(remedies) > 0,
            free_trade_agreements=agreements,
            fta_eligible=len(agreements) > 0,
        )

    def _section301(self, country: str, chapter: str) -> List[Remedy]:
        tables = self.tables
        if country != tables.section301_country:
            return []

        if chapter in tables.section301_textile_chapters:
            rate = tables.section301_textile_rate
            return [
                Remedy(
                    type="Section 301",
                    rate=rate,
                    list=tables.section301_textile_list,
                    hts_provision=tables.section301_textile_provision,
                    authority=tables.section301_authority,
                    note=f"Additional {rate:g}% ad valorem duty on {tables.section301_textile_list} imports",
                )
            ]

        rate = tables.section301_default_rate
        return [
            Remedy(
                type="Section 301",
                rate=rate,
                list=tables.section301_default_list,
                hts_provision=tables.section301_default_provision,
                authority=tables.section301_authority,
                note=f"Additional {rate:g}% ad valorem duty on {tables.section301_default_list} imports",
            )
        ]

    def _section232(self, heading: str) -> List[Remedy]:
        tables = self.tables
        remedies = []

        if heading in tables.steel_headings:
            remedies.append(
                Remedy(
                    type="Section 232",
                    rate=tables.steel_rate,
                    authority=tables.section232_authority,
                    note=f"{tables.steel_rate:g}% tariff on steel imports for national security",
                )
            )

        if heading in tables.aluminum_headings:
            remedies.append(
                Remedy(
                    type="Section 232",
                    rate=tables.aluminum_rate,
                    authority=tables.section232_authority,
                    note=f"{tables.aluminum_rate:g}% tariff on aluminum imports for national security",
                )
            )

        return remedies

    def _free_trade_agreements(self, country: str) -> List[str]:
        return [
            name
            for name, partners in self.tables.fta_partners.items()
            if country in partners
        ]
