import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

from market_ticker.config import TickerConfig

LOGGER = logging.getLogger(__name__)


class QuoteFetcher:
    """Retrieves the raw quote summary text for one symbol per call."""

    def __init__(self, config: TickerConfig, session: Optional[Any] = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    def fetch(self, symbol: str) -> Optional[str]:
        url = self._build_url(symbol)
        try:
            response = self._session.get(
                url,
                headers={"User-Agent": self._config.user_agent},
                timeout=self._config.request_timeout_seconds,
                verify=self._config.verify_ssl,
            )
        except requests.RequestException as exc:
            LOGGER.warning("Fetch failed for %s: %s", symbol, exc)
            return None

        if response.status_code != 200:
            LOGGER.warning(
                "Fetch failed for %s: HTTP %s", symbol, response.status_code
            )
            return None

        LOGGER.info("Fetch ok for %s (%s bytes)", symbol, len(response.text))
        return response.text

    def close(self) -> None:
        close = getattr(self._session, "close", None)
        if close is not None:
            close()

    def _build_url(self, symbol: str) -> str:
        return self._config.quote_url_template.format(symbol=quote(symbol, safe=""))
