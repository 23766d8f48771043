"""
Unit tests for ServiceFactory - Centralized service instance manager

Tests cover:
- Lookup client caching (default and custom base URLs)
- Remedy resolver and classification service singletons
- Cache management operations
- Thread safety
"""

import pytest
import threading
from unittest.mock import patch

from src.services.classification.service import ClassificationService
from src.services.common.service_factory import ServiceFactory
from src.services.hts_lookup.client import TariffLookupClient
from src.services.hts_lookup.config import HTS_API_BASE
from src.services.trade_remedies.resolver import TradeRemedyResolver


class TestServiceFactoryLookupClient:
    """Test lookup client caching functionality"""

    def test_get_lookup_client_default_url(self):
        """Test getting client with default URL returns same instance"""
        client1 = ServiceFactory.get_lookup_client()
        client2 = ServiceFactory.get_lookup_client()

        assert client1 is client2
        assert isinstance(client1, TariffLookupClient)
        assert client1.base_url == HTS_API_BASE

    def test_get_lookup_client_custom_url(self):
        """Test custom URLs cache separately, trailing slash ignored"""
        custom1 = ServiceFactory.get_lookup_client("https://mirror.example.test/reststop")
        custom2 = ServiceFactory.get_lookup_client("https://mirror.example.test/reststop/")
        default = ServiceFactory.get_lookup_client()

        assert custom1 is custom2
        assert custom1 is not default
        assert custom1.base_url == "https://mirror.example.test/reststop"

    def test_get_lookup_client_after_clear(self):
        """Test clearing creates a new client and closes the old one"""
        client1 = ServiceFactory.get_lookup_client()

        with patch.object(client1, "close") as mock_close:
            ServiceFactory.clear_cache()
            mock_close.assert_called_once()

        client2 = ServiceFactory.get_lookup_client()

        assert client1 is not client2


class TestServiceFactoryServices:
    """Test remedy resolver and classification service singletons"""

    def test_get_remedy_resolver_singleton(self):
        resolver1 = ServiceFactory.get_remedy_resolver()
        resolver2 = ServiceFactory.get_remedy_resolver()

        assert resolver1 is resolver2
        assert isinstance(resolver1, TradeRemedyResolver)

    def test_classification_service_wired_to_cached_parts(self):
        """Test the service shares the cached client and resolver"""
        service = ServiceFactory.get_classification_service()

        assert isinstance(service, ClassificationService)
        assert service is ServiceFactory.get_classification_service()
        assert service.client is ServiceFactory.get_lookup_client()
        assert service.remedy_resolver is ServiceFactory.get_remedy_resolver()


class TestServiceFactoryCacheManagement:
    """Test cache management operations"""

    def test_clear_cache_all_services(self):
        """Test clearing cache removes all instances"""
        ServiceFactory.get_classification_service()
        assert ServiceFactory.get_cache_stats()["total_instances"] == 3

        ServiceFactory.clear_cache()

        assert ServiceFactory.get_cache_stats()["total_instances"] == 0

    def test_get_cache_stats(self):
        """Test getting cache statistics"""
        ServiceFactory.get_lookup_client("https://mirror.example.test/reststop")
        ServiceFactory.get_remedy_resolver()

        stats = ServiceFactory.get_cache_stats()

        assert stats["total_instances"] == 2
        assert stats["lookup_client_urls"] == ["https://mirror.example.test/reststop"]
        assert stats["has_remedy_resolver"] is True
        assert stats["has_classification_service"] is False

    def test_cache_stats_empty(self):
        """Test cache stats when cache is empty"""
        stats = ServiceFactory.get_cache_stats()

        assert stats["total_instances"] == 0
        assert stats["instance_types"] == []
        assert stats["lookup_client_urls"] == []
        assert stats["has_remedy_resolver"] is False


class TestServiceFactoryThreadSafety:
    """Test thread safety of ServiceFactory"""

    def test_concurrent_access_same_service(self):
        """Test concurrent access to same service returns same instance"""
        instances = []

        def get_service():
            instances.append(ServiceFactory.get_classification_service())

        # Create 10 threads accessing the service simultaneously
        threads = [threading.Thread(target=get_service) for _ in range(10)]

        for thread in threads:
            thread.start()

        for thread in threads:
            thread.join()

        # All threads should get same instance
        assert len(instances) == 10
        assert all(inst is instances[0] for inst in instances)

    def test_concurrent_access_different_services(self):
        """Test concurrent access to different services works"""
        results = {"client": None, "resolver": None}

        def get_client():
            results["client"] = ServiceFactory.get_lookup_client()

        def get_resolver():
            results["resolver"] = ServiceFactory.get_remedy_resolver()

        threads = [
            threading.Thread(target=get_client),
            threading.Thread(target=get_resolver),
        ]

        for thread in threads:
            thread.start()

        for thread in threads:
            thread.join()

        # All services should be created successfully
        assert isinstance(results["client"], TariffLookupClient)
        assert isinstance(results["resolver"], TradeRemedyResolver)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
