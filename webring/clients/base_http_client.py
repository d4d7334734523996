# clients/base_http_client.py
import requests
import time
import re

from typing import Dict, Any, Optional
from urllib.parse import urljoin
from abc import ABC
from webring.utils.log import app_logger


def sanitize_error(raw: str) -> str:
    """strip memory addresses and api keys from an exception message before logging it"""
    sanitized = re.sub(r'0x[0-9a-fA-F]+', '<ptr>', raw)
    return re.sub(r'key=[^&\s\'")]+', 'key=<redacted>', sanitized)


class BaseHTTPClient(ABC):
    """Base HTTP client with common functionalities like GET, retries, and error handling"""

    USER_AGENT = "webring-api/1.0.0 (+https://github.com/andrewpetrucci/LemonadeStandAnarcyWebRing)"

    def __init__(self,
                 base_url: str,
                 api_key: Optional[str] = None,
                 timeout: int = 30, max_retries: int = 3,
                 retry_delay: float = 1.5,
                 accept: Optional[str] = 'application/json'
                 ):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.accept = accept
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.session = requests.Session()

        # setup default headers
        self._setup_default_headers()

    def _setup_default_headers(self):
        """setup default headers for the client"""
        self.session.headers.update({
            'User-Agent': self.USER_AGENT,
            'Accept': self.accept,
        })

    def _build_url(self, endpoint: str) -> str:
        """build full URL"""
        return urljoin(f"{self.base_url}/", endpoint.lstrip('/'))

    def _make_request(self, method: str, endpoint: str,
                      params: Optional[Dict] = None,
                      headers: Optional[Dict] = None) -> Dict[str, Any]:
        """do HTTP request with retries"""
        url = self._build_url(endpoint)
        request_headers = headers or {}

        for attempt in range(self.max_retries + 1):
            try:
                response = self.session.request(
                    method=method,
                    url=url,
                    params=params,
                    headers=request_headers,
                    timeout=self.timeout
                )

                # rate limited: back off like any other transient failure
                if response.status_code == 429 and attempt < self.max_retries:
                    wait_time = self.retry_delay * (2 ** attempt)
                    app_logger.warning("request.rate_limited", url=sanitize_error(url), attempt=attempt + 1, wait=wait_time)
                    time.sleep(wait_time)
                    continue

                if response.status_code >= 400:
                    app_logger.debug("request.status", method=method, url=sanitize_error(url), status_code=response.status_code)

                response.raise_for_status()

                # try to parse json response
                try:
                    return response.json()
                except ValueError:
                    app_logger.debug("request.parse_text", url=sanitize_error(url), length=len(response.text))
                    return {'text': response.text}

            except requests.exceptions.RequestException as e:
                exc_type = type(e).__name__
                app_logger.error("request.failed", method=method, url=sanitize_error(url), attempt=attempt + 1,
                                 exc_type=exc_type, error=sanitize_error(str(e)))

                if attempt == self.max_retries:
                    raise

                # exponential backoff
                wait_time = self.retry_delay * (2 ** attempt)
                time.sleep(wait_time)

        raise requests.exceptions.RetryError(f"Failed to make request after {self.max_retries + 1} attempts")

    def get(self, endpoint: str, params: Optional[Dict] = None,
            headers: Optional[Dict] = None) -> Dict[str, Any]:
        """do GET request"""
        return self._make_request('GET', endpoint, params=params, headers=headers)

    def close(self):
        """close HTTP session"""
        self.session.close()
