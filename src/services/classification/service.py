"""
Classification Service - Main API Implementation
"""

import logging
import re
from typing import List, Optional

from .config import (
    DATA_SOURCE_NAME,
    LOG_DATE_FORMAT,
    LOG_FILE,
    LOG_FORMAT,
    LOG_LEVEL,
    NO_MATCH_MESSAGE,
    SEARCH_RESULT_LIMIT,
)
from .keywords import build_keywords
from .models import (
    AlternativeCandidate,
    ClassificationResponse,
    ClassificationResult,
    HTSSearchResponse,
    ScoredCandidate,
    SpecialTariff,
)
from .ranker import aggregate_candidates, alternative_confidence, primary_confidence, rank, select
from ..common.errors import InvalidInput, UpstreamUnavailable
from ..hts_lookup.client import TariffLookupClient
from ..hts_lookup.models import LookupResult, ResolvedCandidate
from ..hts_lookup.rates import parse_duty_rate, resolve_rates
from ..trade_remedies.models import TradeRemedyResult
from ..trade_remedies.resolver import TradeRemedyResolver

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT,
    handlers=[logging.FileHandler(LOG_FILE), logging.StreamHandler()],
)

logger = logging.getLogger(__name__)


class ClassificationService:
    """
    Classification Service - ranks HTS codes for a product description

    Keyword strategies fan out sequentially over the lookup client, each
    response is rate-resolved on its own, candidates are merged (first
    seen wins), scored, and the top candidate is checked for trade
    remedies. No state is kept between calls.
    """

    def __init__(
        self,
        client: Optional[TariffLookupClient] = None,
        remedy_resolver: Optional[TradeRemedyResolver] = None,
    ):
        """
        Initialize Classification Service

        Args:
            client: Tariff lookup client (created with config defaults if None)
            remedy_resolver: Trade remedy resolver (default tables if None)
        """
        self.client = client or TariffLookupClient()
        self.remedy_resolver = remedy_resolver or TradeRemedyResolver()

    def classify(
        self, product_description: str, country_of_origin: str
    ) -> ClassificationResponse:
        """
        Classify a product description into ranked HTS candidates

        Args:
            product_description: Free-text product description
            country_of_origin: Two-letter country code

        Returns:
            ClassificationResponse (classification is None when nothing matched)

        Raises:
            InvalidInput: If description or country is missing
        """
        if not product_description or not product_description.strip():
            raise InvalidInput("Missing productDescription")
        if not country_of_origin or not country_of_origin.strip():
            raise InvalidInput("Missing countryOfOrigin")

        country = country_of_origin.strip().upper()
        logger.info(f"classify called: {product_description!r} ({country})")

        keywords = build_keywords(product_description)
        candidates = self._collect_candidates(keywords, tolerate_failures=True)

        if not candidates:
            logger.warning(f"No HTS candidates found for keywords {keywords}")
            return ClassificationResponse(
                classification=None,
                message=NO_MATCH_MESSAGE,
                keywords=keywords,
                total_results=0,
            )

        ranked = rank(candidates, product_description)
        primary, alternatives = select(ranked)

        remedies = self.remedy_resolver.resolve_remedies(
            country, primary.hts_code, product_description
        )
        special_tariffs = self._special_tariffs(primary, remedies)

        classification = ClassificationResult(
            hts_code=primary.hts_code,
            description=primary.description,
            confidence=primary_confidence(primary.score),
            general_rate=primary.general_rate,
            general_duty_rate=parse_duty_rate(primary.general_rate),
            special_rate=primary.special_rate,
            other_rate=primary.other_rate,
            units=list(primary.units),
            section301_note=primary.section301_note,
            special_tariffs=special_tariffs,
            reasoning=self._build_reasoning(primary, remedies, keywords),
            alternatives=[
                AlternativeCandidate(
                    hts_code=alt.hts_code,
                    description=alt.description,
                    confidence=alternative_confidence(alt.score),
                    general_rate=alt.general_rate,
                )
                for alt in alternatives
            ],
            country_of_origin=country,
            country_name=remedies.country_name,
        )

        logger.info(
            f"Classified as {primary.hts_code} (score={primary.score}, "
            f"{len(candidates)} candidates, {len(special_tariffs)} special tariffs)"
        )

        return ClassificationResponse(
            classification=classification,
            keywords=keywords,
            total_results=len(candidates),
        )

    def search_hts(self, query: str, limit: int = SEARCH_RESULT_LIMIT) -> HTSSearchResponse:
        """
        Search HTS codes for a free-text query, most specific codes first

        Upstream failures are not tolerated here and propagate.

        Args:
            query: Free-text query
            limit: Maximum number of results returned

        Returns:
            HTSSearchResponse
        """
        if not query or not query.strip():
            raise InvalidInput("Missing 'query' parameter")

        keywords = build_keywords(query)
        candidates = self._collect_candidates(keywords, tolerate_failures=False)

        # Stable: prefer more digits, then deeper indent
        ordered = sorted(
            candidates,
            key=lambda c: (len(re.sub(r"\D", "", c.hts_code)), c.indent_level),
            reverse=True,
        )

        logger.info(f"search_hts {query!r}: {len(ordered)} results")
        return HTSSearchResponse(
            query=query,
            keywords=keywords,
            results=ordered[:limit],
            total=len(ordered),
        )

    def lookup(self, keyword: str, limit: Optional[int] = None) -> LookupResult:
        """
        Direct single-keyword lookup with rate inheritance

        Args:
            keyword: HTS code or product keyword
            limit: Optional cap on returned candidates

        Returns:
            LookupResult

        Raises:
            UpstreamUnavailable: If the tariff database call fails
        """
        records = self.client.search(keyword)
        resolved = resolve_rates(records)
        if limit is not None:
            resolved = resolved[:limit]

        return LookupResult(keyword=keyword, result_count=len(records), results=resolved)

    def _collect_candidates(
        self, keywords: List[str], tolerate_failures: bool
    ) -> List[ResolvedCandidate]:
        """Run one search per keyword in priority order and merge the results"""
        batches = []

        for keyword in keywords:
            try:
                records = self.client.search(keyword)
            except UpstreamUnavailable as e:
                if not tolerate_failures:
                    raise
                logger.warning(f"Skipping keyword {keyword!r}: {e}")
                continue

            batch = resolve_rates(records)
            logger.debug(f"Keyword {keyword!r}: {len(batch)} candidates")
            batches.append(batch)

        return aggregate_candidates(batches)

    def _special_tariffs(
        self, primary: ScoredCandidate, remedies: TradeRemedyResult
    ) -> List[SpecialTariff]:
        tariffs = []

        for remedy in remedies.remedies:
            name = remedy.type
            if remedy.list:
                name = f"{remedy.type} {remedy.list}"
            tariffs.append(
                SpecialTariff(
                    name=name,
                    rate=remedy.rate,
                    authority=remedy.authority,
                    hts_provision=remedy.hts_provision,
                )
            )

        section301_applies = any(r.type == "Section 301" for r in remedies.remedies)
        if primary.section301_note and section301_applies:
            tariffs.append(
                SpecialTariff(
                    name="Additional Duties (see footnote)",
                    rate=0.0,
                    authority="CBP",
                    hts_provision=primary.section301_note,
                )
            )

        return tariffs

    def _build_reasoning(
        self,
        primary: ScoredCandidate,
        remedies: TradeRemedyResult,
        keywords: List[str],
    ) -> List[str]:
        digits = re.sub(r"\D", "", primary.hts_code)
        steps = [
            "Analyzed product description and identified key terms: "
            + ", ".join(f'"{keyword}"' for keyword in keywords),
            f"Searched {DATA_SOURCE_NAME} for matching codes",
            f'Matched to Chapter {digits[:2]}, Heading {digits[:4]}: "{primary.description}"',
            f"Selected HTS {primary.hts_code} with general duty rate of "
            f"{primary.general_rate or 'not stated'}",
        ]

        if primary.special_rate:
            steps.append(f"Special program rates available: {primary.special_rate}")

        country = remedies.country_name
        if remedies.remedies:
            for remedy in remedies.remedies:
                if remedy.list:
                    steps.append(
                        f"Country of origin {country} triggers {remedy.type} tariff "
                        f"({remedy.list}) at {remedy.rate:g}% additional duty"
                    )
                else:
                    steps.append(
                        f"Heading {digits[:4]} is subject to {remedy.type} at "
                        f"{remedy.rate:g}% additional duty"
                    )
        else:
            steps.append(f"No additional Section 301/232 tariffs apply for {country}")

        if remedies.free_trade_agreements:
            steps.append(
                "Possible free trade agreement eligibility: "
                + ", ".join(remedies.free_trade_agreements)
            )

        return steps
