"""
USITC HTS REST API client
Issues keyword searches against the external tariff schedule database
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from .config import HTS_API_BASE, HTS_API_TIMEOUT, HTS_REQUEST_HEADERS, HTS_SEARCH_PATH
from .models import TariffRecord
from ..common.errors import InvalidInput, UpstreamUnavailable

logger = logging.getLogger(__name__)


class TariffLookupClient:
    """Keyword search client for the USITC tariff database (no retries)"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize lookup client

        Args:
            base_url: REST API base URL (uses config default if not provided)
            timeout: Request timeout in seconds
            session: Optional requests session; without one every search
                opens its own connection, so the client can be shared
                across request threads
        """
        self.base_url = (base_url or HTS_API_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else HTS_API_TIMEOUT
        self.session = session

        logger.debug(
            f"Lookup client initialized (base_url={self.base_url}, timeout={self.timeout}s)"
        )

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{HTS_SEARCH_PATH}"

    def search_raw(self, keyword: str) -> List[Dict[str, Any]]:
        """
        Run one keyword search and return the source's JSON array untouched

        Args:
            keyword: Search keyword (product term or HTS code)

        Returns:
            List of raw HTS entries in source order

        Raises:
            InvalidInput: If keyword is empty
            UpstreamUnavailable: On non-2xx status, timeout, connection
                error or a body that is not a JSON array
        """
        if not keyword or not keyword.strip():
            raise InvalidInput("Search keyword cannot be empty")

        keyword = keyword.strip()
        logger.debug(f"Searching USITC: {keyword!r}")

        try:
            get = self.session.get if self.session is not None else requests.get
            response = get(
                self.search_url,
                params={"keyword": keyword},
                headers=HTS_REQUEST_HEADERS,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.error(f"USITC request timed out for {keyword!r}: {e}")
            raise UpstreamUnavailable(f"USITC API timeout after {self.timeout}s") from e
        except requests.RequestException as e:
            logger.error(f"USITC request failed for {keyword!r}: {type(e).__name__}: {e}")
            raise UpstreamUnavailable(f"USITC API unreachable: {e}") from e

        if not response.ok:
            logger.error(f"USITC API error {response.status_code} for {keyword!r}")
            raise UpstreamUnavailable(
                f"USITC API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse USITC response: {e}")
            raise UpstreamUnavailable(
                "USITC API returned malformed JSON", status_code=response.status_code
            ) from e

        if not isinstance(data, list):
            raise UpstreamUnavailable(
                "USITC API response must be a list of entries",
                status_code=response.status_code,
            )

        logger.debug(f"USITC returned {len(data)} entries for {keyword!r}")
        return data

    def search(self, keyword: str) -> List[TariffRecord]:
        """
        Search the tariff database and parse entries into TariffRecords

        Args:
            keyword: Search keyword

        Returns:
            List of TariffRecord in hierarchical (pre-order) source order
        """
        raw = self.search_raw(keyword)

        try:
            return [TariffRecord.model_validate(item) for item in raw]
        except ValidationError as e:
            logger.error(f"USITC entry failed validation: {e}")
            raise UpstreamUnavailable("USITC API returned unexpected entry shape") from e

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
