"""
Service Factory - Centralized service instance manager with caching

Provides shared access to the engine's services:
- Tariff Lookup Client (one connection per search, no shared session)
- Trade Remedy Resolver (holds the loaded remedy tables)
- Classification Service

Features:
- Lazy initialization (Created only when needed)
- Thread-safe instance creation
- Base-URL aware caching for the lookup client
- Clearable cache for testing

None of the cached services keep per-request state.
"""

import logging
import threading
from typing import Any, Dict, Optional

from ..classification.service import ClassificationService
from ..hts_lookup.client import TariffLookupClient
from ..hts_lookup.config import HTS_API_BASE
from ..trade_remedies.resolver import TradeRemedyResolver

logger = logging.getLogger(__name__)


class ServiceFactory:
    """
    Centralized service instance manager with caching

    Thread-safe; services can still be constructed directly when a caller
    needs a custom instance.
    """

    _instances: Dict[str, Any] = {}
    _lock: threading.Lock = threading.Lock()

    @classmethod
    def get_lookup_client(cls, base_url: Optional[str] = None) -> TariffLookupClient:
        """
        Get or create TariffLookupClient with base-URL aware caching

        Args:
            base_url: REST API base URL (uses default HTS_API_BASE if None)

        Returns:
            TariffLookupClient instance (cached per base URL)
        """
        cache_key = f"lookup_client_{(base_url or HTS_API_BASE).rstrip('/')}"

        if cache_key in cls._instances:
            logger.debug(f"[ServiceFactory] Returning cached lookup client ({cache_key})")
            return cls._instances[cache_key]

        with cls._lock:
            if cache_key not in cls._instances:
                logger.debug(f"[ServiceFactory] Creating new lookup client ({cache_key})")
                cls._instances[cache_key] = TariffLookupClient(base_url=base_url)

        return cls._instances[cache_key]

    @classmethod
    def get_remedy_resolver(cls) -> TradeRemedyResolver:
        """
        Get or create TradeRemedyResolver instance (singleton)

        Returns:
            TradeRemedyResolver instance (tables loaded once)
        """
        cache_key = "remedy_resolver"

        if cache_key in cls._instances:
            logger.debug("[ServiceFactory] Returning cached remedy resolver instance")
            return cls._instances[cache_key]

        with cls._lock:
            if cache_key not in cls._instances:
                logger.info("[ServiceFactory] Creating new remedy resolver instance")
                cls._instances[cache_key] = TradeRemedyResolver()

        return cls._instances[cache_key]

    @classmethod
    def get_classification_service(cls) -> ClassificationService:
        """
        Get or create ClassificationService instance (singleton)

        Returns:
            ClassificationService wired to the cached client and resolver
        """
        cache_key = "classification_service"

        if cache_key in cls._instances:
            logger.debug("[ServiceFactory] Returning cached classification service")
            return cls._instances[cache_key]

        client = cls.get_lookup_client()
        resolver = cls.get_remedy_resolver()

        with cls._lock:
            if cache_key not in cls._instances:
                logger.info("[ServiceFactory] Creating new classification service instance")
                cls._instances[cache_key] = ClassificationService(
                    client=client, remedy_resolver=resolver
                )

        return cls._instances[cache_key]

    @classmethod
    def clear_cache(cls) -> None:
        """
        Clear all cached service instances

        Notes:
            - Closes any injected HTTP sessions
            - Useful for testing (clear between tests)
            - Thread-safe operation
        """
        with cls._lock:
            count = len(cls._instances)
            for key, instance in cls._instances.items():
                if key.startswith("lookup_client_"):
                    instance.close()
            cls._instances.clear()
            logger.info(f"[ServiceFactory] Cleared {count} cached service instances")

    @classmethod
    def get_cache_stats(cls) -> Dict[str, Any]:
        """
        Get statistics about cached instances (for debugging/monitoring)

        Returns:
            Dictionary with cache statistics
        """
        return {
            "total_instances": len(cls._instances),
            "instance_types": list(cls._instances.keys()),
            "lookup_client_urls": [
                k.replace("lookup_client_", "")
                for k in cls._instances.keys()
                if k.startswith("lookup_client_")
            ],
            "has_remedy_resolver": "remedy_resolver" in cls._instances,
            "has_classification_service": "classification_service" in cls._instances,
        }
