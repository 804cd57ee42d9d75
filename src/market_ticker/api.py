import os
import time
from threading import Lock
from typing import List

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from market_ticker.application.quote_repository import QuoteRepository
from market_ticker.application.refresh_service import build_repository
from market_ticker.config import TickerConfig
from market_ticker.domain.models import QuoteState, ViewMode
from market_ticker.output.quote_renderer import render_snapshot


class RenderedQuoteResponse(BaseModel):
    label: str = Field(..., example="SPX")
    text: str = Field(..., example="5,123")
    state: QuoteState = Field(..., description="closed, up, flat or down.")


class QuotesResponse(BaseModel):
    view: ViewMode
    all_succeeded: bool
    failed_symbols: List[str]
    elapsed_seconds: float
    quotes: List[RenderedQuoteResponse]


class RawQuoteResponse(BaseModel):
    label: str
    symbol: str
    current: float
    previous_close: float
    percentage_change: float
    market_open: bool
    refreshed: bool


class RawSnapshotResponse(BaseModel):
    all_succeeded: bool
    quotes: List[RawQuoteResponse]


app = FastAPI(
    title="Market Ticker API",
    description=(
        "Formatted SPX, NDX and 10y yield quotes with up/down/flat/closed state. "
        "Use /docs to try the endpoints via Swagger."
    ),
    version="0.1.0",
)

_refresh_lock = Lock()


def _config_from_env() -> TickerConfig:
    return TickerConfig(
        request_timeout_seconds=float(os.getenv("MARKET_TICKER_REQUEST_TIMEOUT", "10")),
        pacing_seconds=float(os.getenv("MARKET_TICKER_PACING_SECONDS", "1")),
        verify_ssl=os.getenv("MARKET_TICKER_VERIFY_SSL", "true").lower()
        not in ("0", "false", "no"),
    )


def _get_repository() -> QuoteRepository:
    repository = getattr(app.state, "repository", None)
    if repository is None:
        repository = build_repository(_config_from_env())
        app.state.repository = repository
    return repository


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/meta/options")
def options() -> dict:
    config = TickerConfig()
    return {
        "endpoints": ["/health", "/meta/options", "/quotes", "/quotes/raw"],
        "views": [view.value for view in ViewMode],
        "symbols": [tracked.label for tracked in config.symbols],
        "notes": [
            "GET /quotes refreshes every symbol before answering.",
            "GET /quotes/raw returns the last snapshot without refreshing.",
            "Swagger: /docs",
        ],
    }


@app.get("/quotes", response_model=QuotesResponse)
def quotes(view: ViewMode = ViewMode.VALUE) -> QuotesResponse:
    start = time.perf_counter()
    try:
        with _refresh_lock:
            snapshot = _get_repository().refresh()
    except Exception as exc:  # noqa: BLE001
        raise HTTPException(status_code=500, detail=str(exc))

    return QuotesResponse(
        view=view,
        all_succeeded=snapshot.all_succeeded,
        failed_symbols=list(snapshot.failed_symbols),
        elapsed_seconds=round(time.perf_counter() - start, 3),
        quotes=[
            RenderedQuoteResponse(label=row.label, text=row.text, state=row.state)
            for row in render_snapshot(snapshot, view)
        ],
    )


@app.get("/quotes/raw", response_model=RawSnapshotResponse)
def raw_quotes() -> RawSnapshotResponse:
    snapshot = _get_repository().snapshot
    return RawSnapshotResponse(
        all_succeeded=snapshot.all_succeeded,
        quotes=[
            RawQuoteResponse(
                label=entry.tracked.label,
                symbol=entry.tracked.symbol,
                current=entry.quote.current,
                previous_close=entry.quote.previous_close,
                percentage_change=entry.quote.percentage_change,
                market_open=entry.quote.market_open,
                refreshed=entry.refreshed,
            )
            for entry in snapshot.entries
        ],
    )


def run() -> None:
    host = os.getenv("MARKET_TICKER_API_HOST", "127.0.0.1")
    port = int(os.getenv("MARKET_TICKER_API_PORT", "8000"))
    uvicorn.run("market_ticker.api:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    run()
