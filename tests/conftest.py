"""Shared fixtures: fake requests sessions and stub sources."""

from unittest.mock import MagicMock

import pytest
import requests

from blendoracle.errors import FetchError
from blendoracle.quote import Quote


def fake_session(payload=None, status_error=None, get_error=None, json_error=None):
    session = MagicMock()
    if get_error is not None:
        session.get.side_effect = get_error
        return session
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session.get.return_value = response
    return session


def stub_source(name, result):
    """Source fn that returns a Quote or raises a FetchError built from a string."""

    def fetch(symbol, session=None):
        if isinstance(result, Quote):
            return result
        raise FetchError(name, result)

    return (name, fetch)


@pytest.fixture
def http_503():
    return requests.HTTPError("503 Server Error: Service Unavailable")


@pytest.fixture
def quote_a():
    return Quote(symbol="ethereum", usd=3000.0, ts=1000, source="coingecko")


@pytest.fixture
def quote_b():
    return Quote(symbol="ethereum", usd=3010.0, ts=1005, source="binance")
