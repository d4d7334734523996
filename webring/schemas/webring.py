from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class UrlResponse(BaseModel):
    """A single webring member."""
    url: str = Field(..., description="Webring member URL")


class UrlListResponse(BaseModel):
    urls: List[str] = Field(..., description="All webring URLs in ring order")
    count: int = Field(..., description="Number of URLs")


class Picture(BaseModel):
    filename: str
    url: str = Field(..., description="Path the picture is served from")


class PictureListResponse(BaseModel):
    pictures: List[Picture]
    count: int


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable error message")


class ServiceInfo(BaseModel):
    """Service descriptor returned by `GET /`."""
    name: str
    version: str
    mode: Optional[str] = Field(None, description="Set to 'mock' when serving the static test list")
    endpoints: Dict[str, str]
