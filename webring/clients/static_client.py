from typing import Any, List, Optional

DEFAULT_MOCK_URLS = [
    'https://andrewpetrucci.github.io/LemonadeStandAnarcyWebRing/',
    'https://example.com/site1',
    'https://example.com/site2',
    'https://example.com/site3',
    'https://example.com/site4',
]


class StaticSheetsClient:
    """In-memory stand-in for SheetsClient used by mock mode.

    Rows are shaped like a single-column sheet so the ring cache handles them
    exactly as it would a real response.
    """

    def __init__(self, urls: Optional[List[str]] = None):
        self.urls = list(urls) if urls is not None else list(DEFAULT_MOCK_URLS)

    def get_rows(self) -> List[List[Any]]:
        return [[url] for url in self.urls]

    def close(self):
        pass
