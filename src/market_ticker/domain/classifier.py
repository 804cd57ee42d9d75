from market_ticker.domain.models import Quote, QuoteState

FLAT_CHANGE_EPSILON = 0.001


def classify(quote: Quote) -> QuoteState:
    if not quote.market_open:
        return QuoteState.CLOSED
    if quote.current > quote.previous_close:
        return QuoteState.UP
    if quote.current == quote.previous_close:
        return QuoteState.FLAT
    return QuoteState.DOWN


def classify_change(quote: Quote) -> QuoteState:
    # Ratio is computed, so equality uses a tolerance.
    if not quote.market_open:
        return QuoteState.CLOSED
    if abs(quote.percentage_change) < FLAT_CHANGE_EPSILON:
        return QuoteState.FLAT
    if quote.percentage_change > 0:
        return QuoteState.UP
    return QuoteState.DOWN
