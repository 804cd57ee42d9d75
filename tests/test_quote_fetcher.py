import requests

from market_ticker.config import TickerConfig
from market_ticker.infrastructure.quote_fetcher import QuoteFetcher


class FakeResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeSession:
    def __init__(self, response=None, error=None) -> None:
        self._response = response
        self._error = error
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, timeout=None, verify=None):
        self.calls.append(
            {"url": url, "headers": headers, "timeout": timeout, "verify": verify}
        )
        if self._error is not None:
            raise self._error
        return self._response

    def close(self) -> None:
        self.closed = True


def test_fetch_returns_body_and_sends_templated_request() -> None:
    session = FakeSession(FakeResponse(200, '{"regularMarketPrice":5123.45}'))
    config = TickerConfig(request_timeout_seconds=3.0, verify_ssl=False)
    fetcher = QuoteFetcher(config, session=session)

    body = fetcher.fetch("^SPX")

    assert body == '{"regularMarketPrice":5123.45}'
    call = session.calls[0]
    assert call["url"] == (
        "https://query1.finance.yahoo.com/v7/finance/quote?symbols=%5ESPX"
    )
    assert call["headers"]["User-Agent"] == config.user_agent
    assert call["timeout"] == 3.0
    assert call["verify"] is False


def test_fetch_returns_none_on_non_success_status(caplog) -> None:
    session = FakeSession(FakeResponse(429, "Too Many Requests"))
    fetcher = QuoteFetcher(TickerConfig(), session=session)

    with caplog.at_level("WARNING"):
        assert fetcher.fetch("^NDX") is None

    assert "^NDX" in caplog.text
    assert "429" in caplog.text


def test_fetch_returns_none_on_transport_error() -> None:
    session = FakeSession(error=requests.ConnectionError("network down"))
    fetcher = QuoteFetcher(TickerConfig(), session=session)

    assert fetcher.fetch("^TNX") is None


def test_close_closes_session() -> None:
    session = FakeSession(FakeResponse(200))
    fetcher = QuoteFetcher(TickerConfig(), session=session)

    fetcher.close()

    assert session.closed is True
