import logging
import time
from typing import Callable, Dict, Optional

from market_ticker.config import TickerConfig
from market_ticker.domain.models import Quote, QuoteSnapshot, SymbolQuote, TrackedSymbol
from market_ticker.infrastructure.quote_fetcher import QuoteFetcher
from market_ticker.parsing.field_extractor import extract_number, extract_text

LOGGER = logging.getLogger(__name__)


class QuoteRepository:
    """Owns the current snapshot and rebuilds it once per poll.

    A symbol whose fetch fails keeps the quote from the previous snapshot, so
    transient network errors do not flash the display to zero. ``clear`` drops
    the retained quotes.
    """

    def __init__(
        self,
        fetcher: QuoteFetcher,
        config: TickerConfig,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._fetcher = fetcher
        self._config = config
        self._sleep = sleep
        self._snapshot = QuoteSnapshot()

    @property
    def snapshot(self) -> QuoteSnapshot:
        return self._snapshot

    def refresh(self) -> QuoteSnapshot:
        previous: Dict[str, Quote] = {
            entry.tracked.symbol: entry.quote for entry in self._snapshot.entries
        }

        entries = []
        for index, tracked in enumerate(self._config.symbols):
            if index > 0 and self._config.pacing_seconds > 0:
                self._sleep(self._config.pacing_seconds)

            quote = self._load_quote(tracked)
            if quote is None:
                retained = previous.get(tracked.symbol, Quote())
                LOGGER.warning(
                    "%s not refreshed. Keeping previous value %s.",
                    tracked.label,
                    retained.current,
                )
                entries.append(SymbolQuote(tracked=tracked, quote=retained, refreshed=False))
                continue

            LOGGER.info(
                "%s %.1f from %.1f (%+.1f%%) market_open=%s",
                tracked.label,
                quote.current,
                quote.previous_close,
                quote.percentage_change,
                quote.market_open,
            )
            entries.append(SymbolQuote(tracked=tracked, quote=quote))

        # Published only once every symbol is done.
        self._snapshot = QuoteSnapshot(entries=tuple(entries))
        return self._snapshot

    def clear(self) -> None:
        self._snapshot = QuoteSnapshot()

    def _load_quote(self, tracked: TrackedSymbol) -> Optional[Quote]:
        text = self._fetcher.fetch(tracked.symbol)
        if text is None:
            return None

        current = extract_number(text, self._config.price_marker) * tracked.scale
        previous_close = (
            extract_number(text, self._config.previous_close_marker) * tracked.scale
        )
        market_state = extract_text(text, self._config.market_state_marker)
        return Quote.from_prices(
            current=current,
            previous_close=previous_close,
            market_open=market_state.upper() == self._config.open_market_state,
        )
