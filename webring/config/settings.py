from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv, find_dotenv
from os import getenv
from typing import List, Optional

_env_path = find_dotenv(usecwd=True)  # locate a .env file in the working directory or its parents
if _env_path:
    load_dotenv(_env_path)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    # Server
    HOST: str = getenv('HOST', '0.0.0.0')
    PORT: int = int(getenv('PORT', '3000'))

    # Google Sheets data source
    # These may be unset; the ring cache then serves whatever it already has.
    GOOGLE_API_KEY: Optional[str] = getenv('GOOGLE_API_KEY')
    GOOGLE_SHEET_ID: Optional[str] = getenv('GOOGLE_SHEET_ID')
    SHEET_RANGE: str = getenv('SHEET_RANGE', 'Sheet1!A:A')
    SHEETS_TIMEOUT: int = int(getenv('SHEETS_TIMEOUT', '10'))
    SHEETS_MAX_RETRIES: int = int(getenv('SHEETS_MAX_RETRIES', '1'))

    # Static pictures
    PICTURES_DIR: str = getenv('PICTURES_DIR', str(PROJECT_ROOT / 'pictures'))

    # Mock mode serves a fixed url list instead of the spreadsheet
    WEBRING_MOCK_MODE: bool = False
    WEBRING_MOCK_URLS: Optional[str] = getenv('WEBRING_MOCK_URLS')

    def mock_urls(self) -> Optional[List[str]]:
        """Comma separated WEBRING_MOCK_URLS as a list, or None when unset."""
        if not self.WEBRING_MOCK_URLS:
            return None
        return [u.strip() for u in self.WEBRING_MOCK_URLS.split(',') if u.strip()]


settings = Settings()
