"""Unit tests for the CoinGecko and Binance adapters."""

import time

import pytest
import requests

from blendoracle import config
from blendoracle.errors import FetchError, UnsupportedSymbol
from blendoracle.feeds import SOURCES, binance, coingecko

from conftest import fake_session


class TestCoinGecko:
    def test_parses_nested_mapping(self):
        session = fake_session({"ethereum": {"usd": 3012.55}})
        before = int(time.time())
        quote = coingecko.fetch("ethereum", session=session)
        after = int(time.time())

        assert quote.symbol == "ethereum"
        assert quote.usd == 3012.55
        assert quote.source == "coingecko"
        assert before <= quote.ts <= after

    def test_request_contract(self):
        session = fake_session({"bitcoin": {"usd": 61000}})
        coingecko.fetch("bitcoin", session=session)

        session.get.assert_called_once_with(
            config.COINGECKO_URL,
            params={"ids": "bitcoin", "vs_currencies": "usd"},
            timeout=config.REQUEST_TIMEOUT,
        )

    def test_integer_price_becomes_float(self):
        quote = coingecko.fetch("bitcoin", session=fake_session({"bitcoin": {"usd": 61000}}))
        assert quote.usd == 61000.0
        assert isinstance(quote.usd, float)

    def test_unknown_id_is_decode_failure(self):
        # CoinGecko answers {} for ids it does not know
        with pytest.raises(FetchError, match="coingecko: no usd price for dogecoin"):
            coingecko.fetch("dogecoin", session=fake_session({}))

    def test_missing_usd_key(self):
        with pytest.raises(FetchError):
            coingecko.fetch("ethereum", session=fake_session({"ethereum": {"eur": 2800.0}}))

    def test_wrong_body_shape(self):
        with pytest.raises(FetchError):
            coingecko.fetch("ethereum", session=fake_session(["ethereum", 3000.0]))

    def test_null_price_is_not_zero(self):
        with pytest.raises(FetchError, match="unexpected price value"):
            coingecko.fetch("ethereum", session=fake_session({"ethereum": {"usd": None}}))

    def test_http_error(self, http_503):
        with pytest.raises(FetchError, match="503") as exc:
            coingecko.fetch("ethereum", session=fake_session(status_error=http_503))
        assert exc.value.source == "coingecko"

    def test_timeout(self):
        session = fake_session(get_error=requests.Timeout("read timed out"))
        with pytest.raises(FetchError, match="timed out"):
            coingecko.fetch("ethereum", session=session)

    def test_non_json_body(self):
        session = fake_session(json_error=ValueError("Expecting value"))
        with pytest.raises(FetchError, match="malformed response body"):
            coingecko.fetch("ethereum", session=session)


class TestBinance:
    def test_parses_string_price(self):
        session = fake_session({"symbol": "ETHUSDT", "price": "3010.00000000"})
        quote = binance.fetch("ethereum", session=session)

        assert quote.symbol == "ethereum"
        assert quote.usd == 3010.0
        assert quote.source == "binance"
        assert isinstance(quote.ts, int)

    def test_maps_symbol_to_pair(self):
        session = fake_session({"symbol": "BTCUSDT", "price": "61000.10"})
        binance.fetch("bitcoin", session=session)

        session.get.assert_called_once_with(
            config.BINANCE_URL,
            params={"symbol": "BTCUSDT"},
            timeout=config.REQUEST_TIMEOUT,
        )

    def test_unsupported_symbol_makes_no_request(self):
        session = fake_session({"price": "1.0"})
        with pytest.raises(UnsupportedSymbol, match="binance: pair unknown for dogecoin"):
            binance.fetch("dogecoin", session=session)
        session.get.assert_not_called()

    def test_unsupported_symbol_is_a_fetch_error(self):
        assert issubclass(UnsupportedSymbol, FetchError)

    def test_unparseable_price_is_an_error(self):
        session = fake_session({"symbol": "ETHUSDT", "price": "n/a"})
        with pytest.raises(FetchError, match="unparseable price"):
            binance.fetch("ethereum", session=session)

    def test_nan_price_rejected(self):
        session = fake_session({"symbol": "ETHUSDT", "price": "NaN"})
        with pytest.raises(FetchError, match="out of range"):
            binance.fetch("ethereum", session=session)

    def test_negative_price_rejected(self):
        session = fake_session({"symbol": "ETHUSDT", "price": "-1.5"})
        with pytest.raises(FetchError, match="out of range"):
            binance.fetch("ethereum", session=session)

    def test_error_body_without_price(self):
        session = fake_session({"code": -1121, "msg": "Invalid symbol."})
        with pytest.raises(FetchError, match="no price field"):
            binance.fetch("ethereum", session=session)

    def test_connection_error(self):
        session = fake_session(get_error=requests.ConnectionError("connection refused"))
        with pytest.raises(FetchError, match="binance: connection refused"):
            binance.fetch("bitcoin", session=session)


def test_source_order():
    assert [name for name, _ in SOURCES] == ["coingecko", "binance"]
