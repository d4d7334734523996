from typing import Any, List, Optional
from urllib.parse import quote

import requests

from webring.core.exceptions.exceptions import DataSourceUnavailableError
from webring.utils.log import app_logger
from webring.clients.base_http_client import BaseHTTPClient, sanitize_error


class SheetsClient(BaseHTTPClient):
    """Read a cell range from a Google Sheets spreadsheet with an API key.

    Only public (link-shared) sheets are reachable this way, which is what the
    webring uses: the sheet is the list of member sites, one URL per row.
    """

    def __init__(self, api_key: Optional[str], spreadsheet_id: Optional[str],
                 range_selector: str = "Sheet1!A:A",
                 timeout: int = 10, max_retries: int = 1, retry_delay: float = 1.0):
        super().__init__(
            base_url="https://sheets.googleapis.com",
            timeout=timeout,
            max_retries=max_retries,
            retry_delay=retry_delay,
            api_key=api_key
        )
        self.spreadsheet_id = spreadsheet_id
        self.range_selector = range_selector

    def get_values(self, spreadsheet_id: str, range_selector: str) -> List[List[Any]]:
        """Fetch `range_selector` from `spreadsheet_id` as a list of rows.

        Google omits the `values` key entirely when the range is empty, so
        that case comes back as an empty list.

        Raises:
            DataSourceUnavailableError: on transport, HTTP or configuration errors.
        """
        if not self.api_key or not spreadsheet_id:
            raise DataSourceUnavailableError("google_sheets", "GOOGLE_API_KEY and GOOGLE_SHEET_ID must be set")

        endpoint = f"/v4/spreadsheets/{quote(spreadsheet_id, safe='')}/values/{quote(range_selector, safe='')}"
        try:
            response = self.get(endpoint=endpoint, params={"key": self.api_key})
        except requests.exceptions.RequestException as e:
            raise DataSourceUnavailableError("google_sheets", sanitize_error(str(e))) from e

        if not isinstance(response, dict) or 'text' in response:
            raise DataSourceUnavailableError("google_sheets", "unexpected non-JSON response")

        values = response.get('values', [])
        app_logger.debug("sheets.values", range=response.get('range', range_selector), rows=len(values))
        return values

    def get_rows(self) -> List[List[Any]]:
        """rows of the configured spreadsheet range"""
        return self.get_values(self.spreadsheet_id, self.range_selector)
