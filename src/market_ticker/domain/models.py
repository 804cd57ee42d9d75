from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class QuoteState(str, Enum):
    CLOSED = "closed"
    UP = "up"
    FLAT = "flat"
    DOWN = "down"


class ViewMode(str, Enum):
    VALUE = "value"
    CHANGE = "change"


@dataclass(frozen=True)
class TrackedSymbol:
    label: str
    symbol: str
    separator: str = ","
    decimals: int = 0
    scale: float = 1.0


DEFAULT_SYMBOLS: Tuple[TrackedSymbol, ...] = (
    TrackedSymbol(label="SPX", symbol="^SPX", separator=","),
    TrackedSymbol(label="NDX", symbol="^NDX", separator=","),
    # 10y yield scaled so 4.253 is drawn as "4.253" on a grouped integer.
    TrackedSymbol(label="T10", symbol="^TNX", separator=".", scale=1000.0),
)


@dataclass(frozen=True)
class Quote:
    current: float = 0.0
    previous_close: float = 0.0
    percentage_change: float = 0.0
    market_open: bool = False

    @classmethod
    def from_prices(
        cls, current: float, previous_close: float, market_open: bool
    ) -> "Quote":
        if previous_close == 0:
            change = 0.0
        else:
            change = (current - previous_close) / previous_close * 100
        return cls(
            current=current,
            previous_close=previous_close,
            percentage_change=change,
            market_open=market_open,
        )


@dataclass(frozen=True)
class SymbolQuote:
    tracked: TrackedSymbol
    quote: Quote
    refreshed: bool = True


@dataclass(frozen=True)
class QuoteSnapshot:
    """Quotes for every tracked symbol from one poll cycle, in display order."""

    entries: Tuple[SymbolQuote, ...] = field(default_factory=tuple)

    @property
    def all_succeeded(self) -> bool:
        return all(entry.refreshed for entry in self.entries)

    @property
    def failed_symbols(self) -> Tuple[str, ...]:
        return tuple(
            entry.tracked.symbol for entry in self.entries if not entry.refreshed
        )

    def get(self, symbol: str) -> Optional[SymbolQuote]:
        for entry in self.entries:
            if entry.tracked.symbol == symbol or entry.tracked.label == symbol:
                return entry
        return None
