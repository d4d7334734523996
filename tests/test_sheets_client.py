"""Tests for the Google Sheets client and the HTTP client base it builds on."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from webring.clients.base_http_client import sanitize_error
from webring.clients.sheets_client import SheetsClient
from webring.clients.static_client import DEFAULT_MOCK_URLS, StaticSheetsClient
from webring.core.exceptions.exceptions import DataSourceUnavailableError
from webring.services.ring_cache import RingCache, extract_urls


def _response(payload, status_code: int = 200) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(payload).encode() if not isinstance(payload, bytes) else payload
    response.url = "https://sheets.googleapis.com/"
    return response


@pytest.fixture
def sheets() -> SheetsClient:
    return SheetsClient(api_key="test-key", spreadsheet_id="sheet123", range_selector="Sheet1!A:A",
                        max_retries=1, retry_delay=0)


class TestSheetsClient:
    def test_request_shape(self, sheets: SheetsClient) -> None:
        payload = {"range": "Sheet1!A1:A2", "majorDimension": "ROWS", "values": [["https://a.example/"]]}
        with patch.object(sheets.session, "request", return_value=_response(payload)) as mock_request:
            rows = sheets.get_rows()

        assert rows == [["https://a.example/"]]
        kwargs = mock_request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "https://sheets.googleapis.com/v4/spreadsheets/sheet123/values/Sheet1%21A%3AA"
        assert kwargs["params"] == {"key": "test-key"}
        assert kwargs["timeout"] == 10

    def test_key_only_sent_as_query_param(self, sheets: SheetsClient) -> None:
        assert set(sheets.session.headers) >= {"User-Agent", "Accept"}
        assert "test-key" not in " ".join(sheets.session.headers.values())
        assert "Authorization" not in sheets.session.headers

    def test_missing_values_is_empty(self, sheets: SheetsClient) -> None:
        with patch.object(sheets.session, "request", return_value=_response({"range": "Sheet1!A1:A1000"})):
            assert sheets.get_rows() == []

    def test_http_error_is_wrapped(self, sheets: SheetsClient) -> None:
        with patch.object(sheets.session, "request", return_value=_response({"error": {}}, status_code=403)), \
                patch("webring.clients.base_http_client.time.sleep"):
            with pytest.raises(DataSourceUnavailableError):
                sheets.get_rows()

    def test_retries_transport_errors(self, sheets: SheetsClient) -> None:
        ok = _response({"values": [["A"]]})
        with patch.object(sheets.session, "request",
                          side_effect=[requests.exceptions.ConnectionError("reset"), ok]) as mock_request, \
                patch("webring.clients.base_http_client.time.sleep") as mock_sleep:
            assert sheets.get_rows() == [["A"]]

        assert mock_request.call_count == 2
        mock_sleep.assert_called_once()

    def test_gives_up_after_max_retries(self, sheets: SheetsClient) -> None:
        error = requests.exceptions.Timeout("read timed out")
        with patch.object(sheets.session, "request", side_effect=error) as mock_request, \
                patch("webring.clients.base_http_client.time.sleep"):
            with pytest.raises(DataSourceUnavailableError) as exc_info:
                sheets.get_rows()

        assert mock_request.call_count == 2
        assert exc_info.value.service == "google_sheets"

    def test_non_json_response(self, sheets: SheetsClient) -> None:
        with patch.object(sheets.session, "request", return_value=_response(b"<html>oops</html>")):
            with pytest.raises(DataSourceUnavailableError):
                sheets.get_rows()

    @pytest.mark.parametrize("api_key,sheet_id", [(None, "sheet123"), ("key", None), ("", "")])
    def test_unconfigured_client_fails_without_request(self, api_key, sheet_id) -> None:
        client = SheetsClient(api_key=api_key, spreadsheet_id=sheet_id)
        client.session.request = MagicMock()
        with pytest.raises(DataSourceUnavailableError):
            client.get_rows()
        client.session.request.assert_not_called()

    def test_ring_cache_absorbs_client_failure(self, sheets: SheetsClient) -> None:
        ring = RingCache(sheets, clock=lambda: 0.0)
        with patch.object(sheets.session, "request", side_effect=requests.exceptions.ConnectionError("down")), \
                patch("webring.clients.base_http_client.time.sleep"):
            assert ring.list_urls() == []


class TestSanitizeError:
    def test_redacts_api_key(self) -> None:
        raw = "HTTPSConnectionPool: Max retries exceeded with url: /v4/x?key=AIzaSECRET (Caused by ...)"
        assert "AIzaSECRET" not in sanitize_error(raw)
        assert "key=<redacted>" in sanitize_error(raw)

    def test_redacts_memory_addresses(self) -> None:
        assert sanitize_error("<HTTPSConnection object at 0x7f3a2b>") == "<HTTPSConnection object at <ptr>>"


class TestStaticSheetsClient:
    def test_default_mock_list(self) -> None:
        assert extract_urls(StaticSheetsClient().get_rows()) == DEFAULT_MOCK_URLS

    def test_custom_urls(self) -> None:
        assert StaticSheetsClient(["x", "y"]).get_rows() == [["x"], ["y"]]
