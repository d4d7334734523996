"""Shared test fixtures for the webring API.

Provides a controllable clock, an in-memory row source that can be told to
fail, and a TestClient whose ring cache and pictures service are swapped for
test instances through FastAPI dependency overrides.
"""

from __future__ import annotations

import random
from typing import Any, List, Optional

import pytest
from fastapi.testclient import TestClient

from webring.main import app
from webring.services.pictures_service import PicturesService, get_pictures_service
from webring.services.ring_cache import RingCache, get_ring_cache


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSource:
    """Row source returning a configurable sheet, or raising when `error` is set."""

    def __init__(self, rows: Optional[List[List[Any]]] = None) -> None:
        self.rows = rows if rows is not None else []
        self.error: Optional[Exception] = None
        self.calls = 0

    @classmethod
    def of_urls(cls, urls: List[str]) -> "FakeSource":
        return cls([[u] for u in urls])

    def set_urls(self, urls: List[str]) -> None:
        self.rows = [[u] for u in urls]

    def get_rows(self) -> List[List[Any]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.rows


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def source() -> FakeSource:
    return FakeSource.of_urls(["A", "B", "C"])


@pytest.fixture
def ring(source: FakeSource, clock: FakeClock) -> RingCache:
    return RingCache(source, clock=clock, rng=random.Random(1234))


@pytest.fixture
def pictures_dir(tmp_path):
    directory = tmp_path / "pictures"
    directory.mkdir()
    return directory


@pytest.fixture
def client(ring: RingCache, pictures_dir) -> TestClient:
    app.dependency_overrides[get_ring_cache] = lambda: ring
    app.dependency_overrides[get_pictures_service] = lambda: PicturesService(str(pictures_dir))
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
