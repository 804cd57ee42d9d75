from dataclasses import dataclass
from typing import List

from market_ticker.domain.classifier import classify, classify_change
from market_ticker.domain.models import QuoteSnapshot, QuoteState, SymbolQuote, ViewMode
from market_ticker.output.number_formatter import format_grouped, format_percent_change


@dataclass(frozen=True)
class RenderedQuote:
    label: str
    text: str
    state: QuoteState


def render(entry: SymbolQuote, view: ViewMode) -> RenderedQuote:
    tracked = entry.tracked
    quote = entry.quote
    if view == ViewMode.CHANGE:
        return RenderedQuote(
            label=tracked.label,
            text=format_percent_change(quote.percentage_change),
            state=classify_change(quote),
        )
    return RenderedQuote(
        label=tracked.label,
        text=format_grouped(quote.current, tracked.separator, tracked.decimals),
        state=classify(quote),
    )


def render_snapshot(snapshot: QuoteSnapshot, view: ViewMode) -> List[RenderedQuote]:
    return [render(entry, view) for entry in snapshot.entries]
