"""Pytest configuration and shared fixtures for /records client tests."""

import logging
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio

from managed_records.services.records_client import RecordsClient

BASE_URL = "http://records.test"


def make_record(id, color="red", disposition="open", **extra) -> dict:
    """Raw /records item as the endpoint returns it."""
    return {"id": id, "color": color, "disposition": disposition, **extra}


@pytest.fixture
def diag_logger() -> MagicMock:
    """Stand-in logger; assertions inspect its warning() calls."""
    return MagicMock(spec=logging.Logger)


@pytest_asyncio.fixture
async def make_client(diag_logger):
    """Return factory(handler, **kwargs) -> RecordsClient backed by httpx.MockTransport."""
    opened: list[httpx.AsyncClient] = []

    def _make(handler, **kwargs) -> RecordsClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        opened.append(http)
        kwargs.setdefault("pad_single_color", True)
        return RecordsClient(BASE_URL, client=http, logger=diag_logger, **kwargs)

    yield _make
    for http in opened:
        await http.aclose()


@pytest.fixture
def json_handler():
    """Return factory(records, status=200) -> handler that records the requests it served."""

    def _factory(records, status: int = 200):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(status, json=records)

        handler.requests = seen
        return handler

    return _factory
