import io

from market_ticker.domain.models import (
    DEFAULT_SYMBOLS,
    Quote,
    QuoteSnapshot,
    QuoteState,
    SymbolQuote,
    ViewMode,
)
from market_ticker.output.console_display import ConsoleDisplay
from market_ticker.output.quote_renderer import RenderedQuote, render, render_snapshot


def _snapshot() -> QuoteSnapshot:
    spx, ndx, t10 = DEFAULT_SYMBOLS
    return QuoteSnapshot(
        entries=(
            SymbolQuote(
                tracked=spx,
                quote=Quote.from_prices(5123.45, 5100.0, market_open=True),
            ),
            SymbolQuote(
                tracked=ndx,
                quote=Quote.from_prices(17800.0, 17900.0, market_open=True),
            ),
            SymbolQuote(
                tracked=t10,
                quote=Quote.from_prices(4253.0, 4200.0, market_open=False),
            ),
        )
    )


def test_render_value_view_uses_symbol_separator() -> None:
    rows = render_snapshot(_snapshot(), ViewMode.VALUE)

    assert rows == [
        RenderedQuote(label="SPX", text="5,123", state=QuoteState.UP),
        RenderedQuote(label="NDX", text="17,800", state=QuoteState.DOWN),
        RenderedQuote(label="T10", text="4.253", state=QuoteState.CLOSED),
    ]


def test_render_change_view_shows_signed_percent() -> None:
    rows = render_snapshot(_snapshot(), ViewMode.CHANGE)

    assert [row.text for row in rows] == ["+0.5%", "-0.6%", "+1.3%"]
    assert [row.state for row in rows] == [
        QuoteState.UP,
        QuoteState.DOWN,
        QuoteState.CLOSED,
    ]


def test_render_flat_quote() -> None:
    entry = SymbolQuote(
        tracked=DEFAULT_SYMBOLS[0],
        quote=Quote.from_prices(5100.0, 5100.0, market_open=True),
    )

    assert render(entry, ViewMode.VALUE).state == QuoteState.FLAT
    assert render(entry, ViewMode.CHANGE) == RenderedQuote(
        label="SPX", text="+0.0%", state=QuoteState.FLAT
    )


def test_console_display_writes_aligned_rows() -> None:
    stream = io.StringIO()
    display = ConsoleDisplay(stream=stream, use_color=False)

    display.show(render_snapshot(_snapshot(), ViewMode.VALUE))

    assert stream.getvalue().splitlines() == [
        "SPX     5,123",
        "NDX    17,800",
        "T10     4.253",
    ]


def test_console_display_colors_by_state() -> None:
    stream = io.StringIO()
    display = ConsoleDisplay(stream=stream)

    display.show([RenderedQuote(label="SPX", text="5,123", state=QuoteState.DOWN)])

    assert stream.getvalue().startswith("SPX \033[31m")
    assert stream.getvalue().rstrip("\n").endswith("\033[0m")
