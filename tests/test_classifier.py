from market_ticker.domain.classifier import classify, classify_change
from market_ticker.domain.models import Quote, QuoteState


def test_classify_by_value() -> None:
    assert classify(Quote(current=100, previous_close=90, market_open=True)) == QuoteState.UP
    assert classify(Quote(current=90, previous_close=100, market_open=True)) == QuoteState.DOWN
    assert classify(Quote(current=100, previous_close=100, market_open=True)) == QuoteState.FLAT


def test_classify_closed_market_ignores_values() -> None:
    assert classify(Quote(current=100, previous_close=90, market_open=False)) == QuoteState.CLOSED
    assert classify(Quote(current=80, previous_close=90, market_open=False)) == QuoteState.CLOSED


def test_classify_change_uses_epsilon_for_flat() -> None:
    assert classify_change(Quote(percentage_change=0.0009, market_open=True)) == QuoteState.FLAT
    assert classify_change(Quote(percentage_change=-0.0009, market_open=True)) == QuoteState.FLAT
    assert classify_change(Quote(percentage_change=0.002, market_open=True)) == QuoteState.UP
    assert classify_change(Quote(percentage_change=-0.002, market_open=True)) == QuoteState.DOWN


def test_classify_change_closed_market() -> None:
    assert classify_change(Quote(percentage_change=1.5, market_open=False)) == QuoteState.CLOSED
