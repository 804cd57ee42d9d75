import sys
from typing import Iterable, Optional, TextIO

from market_ticker.domain.models import QuoteState
from market_ticker.output.quote_renderer import RenderedQuote

# ANSI stand-ins for the TFT palette.
STATE_COLORS = {
    QuoteState.CLOSED: "\033[90m",
    QuoteState.UP: "\033[32m",
    QuoteState.FLAT: "\033[37m",
    QuoteState.DOWN: "\033[31m",
}
RESET = "\033[0m"
VALUE_WIDTH = 9


class ConsoleDisplay:
    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True) -> None:
        self._stream = stream or sys.stdout
        self._use_color = use_color

    def show(self, rows: Iterable[RenderedQuote]) -> None:
        lines = [self._format_row(row) for row in rows]
        self._stream.write("\n".join(lines) + "\n")
        self._stream.flush()

    def _format_row(self, row: RenderedQuote) -> str:
        text = row.text.rjust(VALUE_WIDTH)
        if self._use_color:
            text = "{0}{1}{2}".format(STATE_COLORS[row.state], text, RESET)
        return "{0:<4}{1}".format(row.label, text)
