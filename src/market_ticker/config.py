from dataclasses import dataclass
from typing import Tuple

from market_ticker.domain.models import DEFAULT_SYMBOLS, TrackedSymbol


@dataclass
class TickerConfig:
    quote_url_template: str = (
        "https://query1.finance.yahoo.com/v7/finance/quote?symbols={symbol}"
    )
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    request_timeout_seconds: float = 10.0
    verify_ssl: bool = True
    pacing_seconds: float = 1.0
    view_interval_seconds: float = 2.0
    price_marker: str = '"regularMarketPrice":'
    previous_close_marker: str = '"regularMarketPreviousClose":'
    market_state_marker: str = '"marketState":'
    open_market_state: str = "REGULAR"
    symbols: Tuple[TrackedSymbol, ...] = DEFAULT_SYMBOLS
