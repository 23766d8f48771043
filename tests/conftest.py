import pytest
import sys
from pathlib import Path

# Add src to Path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.services.common.errors import UpstreamUnavailable
from src.services.hts_lookup.models import TariffRecord


class FakeLookupClient:
    """In-memory stand-in for TariffLookupClient keyed by search keyword"""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def search_raw(self, keyword):
        self.calls.append(keyword)
        response = self.responses.get(keyword, [])
        if isinstance(response, Exception):
            raise response
        return response

    def search(self, keyword):
        return [TariffRecord.model_validate(item) for item in self.search_raw(keyword)]

    def close(self):
        pass


@pytest.fixture(autouse=True)
def clear_service_factory_cache():
    """
    Auto Clear ServiceFactory cache before and after each test

    Ensures test isolation by preventing cached instances from one test affecting another test.

    This fixture runs automatically for ALL tests (autouse=True)
    """

    from src.services.common.service_factory import ServiceFactory

    # Clear ServiceFactory cache before test
    ServiceFactory.clear_cache()

    # Yield control back to test
    yield

    # Clear ServiceFactory cache after test
    ServiceFactory.clear_cache()


@pytest.fixture
def sweatshirt_records():
    """USITC search response for 'sweatshirt' (heading 6110, cotton branch)"""
    return [
        {
            "htsno": "6110",
            "indent": "0",
            "description": "Sweaters, pullovers, sweatshirts, waistcoats (vests) and similar articles, knitted or crocheted:",
            "general": "",
            "special": "",
            "other": "",
            "units": [],
            "footnotes": [],
        },
        {
            "htsno": "6110.20",
            "indent": "1",
            "description": "Of cotton:",
            "general": "",
            "special": "",
            "other": "",
            "units": [],
            "footnotes": [],
        },
        {
            "htsno": "6110.20.20",
            "indent": "2",
            "description": "Other:",
            "general": "16.5%",
            "special": "Free (AU,BH,CL,CO,IL,JO,KR,MA,OM,P,PA,PE,S,SG)",
            "other": "45%",
            "units": [],
            "footnotes": [],
        },
        {
            "htsno": "6110.20.20.10",
            "indent": "3",
            "description": "Sweatshirts",
            "general": "",
            "special": "",
            "other": "",
            "units": ["doz.", "kg"],
            "footnotes": [
                {
                    "columns": ["general"],
                    "marker": "1",
                    "value": "See 9903.88.15. ",
                    "type": "endnote",
                }
            ],
        },
        {
            "htsno": "6110.20.20.20",
            "indent": "3",
            "description": "Other",
            "general": "",
            "special": "",
            "other": "",
            "units": ["doz.", "kg"],
            "footnotes": [],
        },
    ]


@pytest.fixture
def cotton_fabric_records():
    """USITC search response for 'cotton sweatshirt' (unrelated fabric heading)"""
    return [
        {
            "htsno": "5208.12",
            "indent": "1",
            "description": "Plain weave, weighing more than 100 g/m2:",
            "general": "",
            "special": "",
            "other": "",
            "units": [],
            "footnotes": [],
        },
        {
            "htsno": "5208.12.40",
            "indent": "2",
            "description": "Woven fabrics of cotton, unbleached",
            "general": "7%",
            "special": "Free (A,AU,BH)",
            "other": "33%",
            "units": ["m2", "kg"],
            "footnotes": [],
        },
    ]


@pytest.fixture
def make_client():
    """Factory for FakeLookupClient instances"""
    return FakeLookupClient


@pytest.fixture
def sweatshirt_client(sweatshirt_records, cotton_fabric_records):
    """Fake client answering the keywords of 'cotton hooded sweatshirt'"""
    return FakeLookupClient(
        {
            "sweatshirt": sweatshirt_records,
            "cotton sweatshirt": cotton_fabric_records,
            "hooded sweatshirt": UpstreamUnavailable("USITC API error: 503", 503),
        }
    )
