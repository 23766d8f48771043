"""
Unit tests for HTS Lookup Service
"""

import pytest
import requests
from unittest.mock import MagicMock, patch

from src.services.common.errors import InvalidInput, UpstreamUnavailable
from src.services.hts_lookup.client import TariffLookupClient
from src.services.hts_lookup.models import Footnote, TariffRecord
from src.services.hts_lookup.rates import (
    extract_section301_note,
    parse_duty_rate,
    resolve_rates,
)


def make_response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def record(code, indent, general="", special="", other="", description="Item"):
    return TariffRecord(
        htsno=code,
        indent=indent,
        description=description,
        general=general,
        special=special,
        other=other,
    )


class TestTariffLookupClient:
    """Test USITC keyword search client"""

    def test_search_parses_records_in_order(self, sweatshirt_records):
        """Test records are parsed and source order preserved"""
        session = MagicMock()
        session.get.return_value = make_response(payload=sweatshirt_records)

        client = TariffLookupClient(base_url="https://example.test/reststop", session=session)
        records = client.search("sweatshirt")

        assert [r.code for r in records] == [
            "6110",
            "6110.20",
            "6110.20.20",
            "6110.20.20.10",
            "6110.20.20.20",
        ]
        assert records[3].indent_level == 3
        assert records[3].units == ["doz.", "kg"]
        assert records[2].general_rate == "16.5%"

    def test_search_request_shape(self):
        """Test one GET to the search endpoint with keyword and timeout"""
        session = MagicMock()
        session.get.return_value = make_response(payload=[])

        client = TariffLookupClient(
            base_url="https://example.test/reststop/", timeout=2.5, session=session
        )
        client.search("cotton sweatshirt")

        session.get.assert_called_once()
        args, kwargs = session.get.call_args
        assert args[0] == "https://example.test/reststop/search"
        assert kwargs["params"] == {"keyword": "cotton sweatshirt"}
        assert kwargs["timeout"] == 2.5
        assert kwargs["headers"]["Accept"] == "application/json"

    def test_non_success_status_raises(self):
        """Test non-2xx response raises UpstreamUnavailable with status code"""
        session = MagicMock()
        session.get.return_value = make_response(status_code=503)

        client = TariffLookupClient(session=session)

        with pytest.raises(UpstreamUnavailable) as exc_info:
            client.search("sweatshirt")

        assert exc_info.value.status_code == 503

    def test_timeout_raises_upstream_unavailable(self):
        """Test timeouts surface as UpstreamUnavailable without a status"""
        session = MagicMock()
        session.get.side_effect = requests.Timeout("read timed out")

        client = TariffLookupClient(session=session)

        with pytest.raises(UpstreamUnavailable) as exc_info:
            client.search("sweatshirt")

        assert exc_info.value.status_code is None

    def test_connection_error_raises_upstream_unavailable(self):
        """Test unreachable host surfaces as UpstreamUnavailable"""
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")

        client = TariffLookupClient(session=session)

        with pytest.raises(UpstreamUnavailable):
            client.search("sweatshirt")

    def test_malformed_json_raises(self):
        """Test unparseable body raises UpstreamUnavailable"""
        session = MagicMock()
        session.get.return_value = make_response(json_error=ValueError("bad json"))

        client = TariffLookupClient(session=session)

        with pytest.raises(UpstreamUnavailable):
            client.search("sweatshirt")

    def test_non_list_body_raises(self):
        """Test a JSON object instead of an array is rejected"""
        session = MagicMock()
        session.get.return_value = make_response(payload={"error": "nope"})

        client = TariffLookupClient(session=session)

        with pytest.raises(UpstreamUnavailable):
            client.search("sweatshirt")

    def test_empty_keyword_fails_before_network(self):
        """Test empty keyword raises InvalidInput and makes no call"""
        session = MagicMock()
        client = TariffLookupClient(session=session)

        with pytest.raises(InvalidInput):
            client.search("   ")

        session.get.assert_not_called()

    def test_search_raw_returns_untouched_payload(self, sweatshirt_records):
        """Test raw search passes the source JSON through"""
        session = MagicMock()
        session.get.return_value = make_response(payload=sweatshirt_records)

        client = TariffLookupClient(session=session)

        assert client.search_raw("sweatshirt") == sweatshirt_records

    def test_without_session_each_search_uses_requests_get(self, sweatshirt_records):
        """Test a client with no injected session keeps no shared session"""
        client = TariffLookupClient(base_url="https://example.test/reststop")

        with patch(
            "src.services.hts_lookup.client.requests.get",
            return_value=make_response(payload=sweatshirt_records),
        ) as mock_get:
            client.search("sweatshirt")
            client.search("cotton sweatshirt")

        assert client.session is None
        assert mock_get.call_count == 2
        assert mock_get.call_args.kwargs["params"] == {"keyword": "cotton sweatshirt"}

        # Nothing to release
        client.close()


class TestTariffRecord:
    """Test raw record normalization"""

    def test_indent_string_coerced(self):
        """Test string indent from the API is converted to int"""
        item = TariffRecord.model_validate({"htsno": "6110", "indent": "2"})
        assert item.indent_level == 2

    def test_invalid_indent_defaults_to_zero(self):
        """Test unparseable indent falls back to 0"""
        item = TariffRecord.model_validate({"htsno": "6110", "indent": "x"})
        assert item.indent_level == 0

    def test_null_fields_become_empty(self):
        """Test null rates and units are normalized"""
        item = TariffRecord.model_validate(
            {"htsno": None, "indent": 0, "general": None, "units": None, "footnotes": None}
        )
        assert item.code == ""
        assert item.general_rate == ""
        assert item.units == []
        assert item.footnotes == []

    def test_records_are_immutable(self):
        """Test records cannot be mutated after construction"""
        item = record("6110", 0)
        with pytest.raises(Exception):
            item.code = "6111"


class TestRateResolver:
    """Test hierarchical rate inheritance"""

    def test_inherits_from_first_rated_record(self):
        """Test every empty-rate record inherits the first record's rate"""
        records = [
            record("6110.20.20", 0, general="16.5%", special="Free (AU)", other="45%"),
            record("6110.20.20.10", 1),
            record("6110.20.20.20", 1),
            record("6110.20.20.30", 2),
        ]

        resolved = resolve_rates(records)

        assert [c.general_rate for c in resolved] == ["16.5%"] * 4
        assert [c.special_rate for c in resolved] == ["Free (AU)"] * 4
        assert [c.other_rate for c in resolved] == ["45%"] * 4

    def test_inheritance_resets_on_new_rate(self):
        """Test records after a newly rated record inherit from it, not the original"""
        records = [
            record("6110.20.10", 2, general="16.5%"),
            record("6110.20.10.10", 3),
            record("6110.20.20", 2, general="32%"),
            record("6110.20.20.10", 3),
            record("6110.20.20.20", 3),
        ]

        resolved = resolve_rates(records)

        assert [c.general_rate for c in resolved] == [
            "16.5%",
            "16.5%",
            "32%",
            "32%",
            "32%",
        ]

    def test_own_rate_wins_over_ancestor(self):
        """Test a record with its own rate resolves to itself"""
        records = [
            record("6110", 0, general="20%"),
            record("6110.30", 1, general="28.2%"),
        ]

        resolved = resolve_rates(records)

        assert resolved[1].general_rate == "28.2%"

    def test_rates_inherited_independently(self):
        """Test general, special and other accumulate separately"""
        records = [
            record("6110", 0, general="16.5%", other="45%"),
            record("6110.20", 1, special="Free (KR)"),
            record("6110.20.10", 2),
        ]

        resolved = resolve_rates(records)

        assert resolved[2].general_rate == "16.5%"
        assert resolved[2].special_rate == "Free (KR)"
        assert resolved[2].other_rate == "45%"
        assert resolved[0].special_rate == ""

    def test_header_rows_dropped_but_propagate(self):
        """Test rows without a code are filtered yet pass their rate down"""
        records = [
            record("", 0, general="Free", description="Header"),
            record("9503.00.00", 1),
        ]

        resolved = resolve_rates(records)

        assert len(resolved) == 1
        assert resolved[0].hts_code == "9503.00.00"
        assert resolved[0].general_rate == "Free"

    def test_no_rated_ancestor_stays_empty(self):
        """Test an unrated chain resolves to empty, not a default"""
        records = [record("6110", 0), record("6110.20", 1)]

        resolved = resolve_rates(records)

        assert [c.general_rate for c in resolved] == ["", ""]

    def test_calls_do_not_share_state(self):
        """Test each call starts from an empty accumulator"""
        resolve_rates([record("6110", 0, general="16.5%")])

        resolved = resolve_rates([record("6111", 0)])

        assert resolved[0].general_rate == ""

    def test_section301_note_attached(self, sweatshirt_records):
        """Test footnote reference is extracted per candidate"""
        records = [TariffRecord.model_validate(item) for item in sweatshirt_records]

        resolved = resolve_rates(records)
        notes = {c.hts_code: c.section301_note for c in resolved}

        assert notes["6110.20.20.10"] == "See 9903.88.15."
        assert notes["6110.20.20.20"] is None


class TestFootnotesAndRates:
    """Test footnote extraction and duty rate parsing"""

    def test_first_matching_footnote_returned(self):
        """Test the first 9903.88 reference wins"""
        footnotes = [
            Footnote(value="See 9903.01.25"),
            Footnote(value=" See 9903.88.03. "),
            Footnote(value="See 9903.88.15."),
        ]
        assert extract_section301_note(footnotes) == "See 9903.88.03."

    def test_no_matching_footnote(self):
        """Test None when no footnote references 9903.88"""
        assert extract_section301_note([Footnote(value="See 9903.01.25")]) is None
        assert extract_section301_note([]) is None

    @pytest.mark.parametrize(
        "rate_str, expected",
        [
            ("16.5%", 16.5),
            ("Free", 0.0),
            ("", 0.0),
            (None, 0.0),
            ("2.2¢/kg + 10%", 10.0),
            ("47¢/kg", 0.47),
            ("See heading 9902", 0.0),
        ],
    )
    def test_parse_duty_rate(self, rate_str, expected):
        """Test rate strings convert to percentages with zero fallback"""
        assert parse_duty_rate(rate_str) == pytest.approx(expected)
