import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from market_ticker.application.quote_repository import QuoteRepository
from market_ticker.config import TickerConfig
from market_ticker.domain.models import QuoteSnapshot, ViewMode
from market_ticker.infrastructure.quote_fetcher import QuoteFetcher
from market_ticker.output.console_display import ConsoleDisplay
from market_ticker.output.quote_renderer import render_snapshot

LOGGER = logging.getLogger(__name__)


@dataclass
class RefreshExecutionParams:
    views: List[ViewMode] = field(default_factory=lambda: [ViewMode.VALUE])
    loop: bool = False
    cycles: Optional[int] = None
    interval_seconds: float = 2.0
    pacing_seconds: float = 1.0
    timeout_seconds: float = 10.0
    verify_ssl: bool = True


@dataclass
class RefreshExecutionResult:
    cycles: int
    all_succeeded: bool
    failed_symbols: List[str]


def build_config(params: RefreshExecutionParams) -> TickerConfig:
    return TickerConfig(
        request_timeout_seconds=params.timeout_seconds,
        verify_ssl=params.verify_ssl,
        pacing_seconds=params.pacing_seconds,
        view_interval_seconds=params.interval_seconds,
    )


def build_repository(
    config: TickerConfig,
    fetcher: Optional[QuoteFetcher] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> QuoteRepository:
    return QuoteRepository(fetcher or QuoteFetcher(config), config, sleep=sleep)


def run_refresh_job(
    params: RefreshExecutionParams,
    display: Optional[ConsoleDisplay] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RefreshExecutionResult:
    config = build_config(params)
    fetcher = QuoteFetcher(config)
    repository = build_repository(config, fetcher, sleep=sleep)
    display = display or ConsoleDisplay()

    try:
        if params.loop:
            return run_display_loop(
                repository,
                display,
                interval_seconds=config.view_interval_seconds,
                cycles=params.cycles,
                sleep=sleep,
            )

        snapshot = repository.refresh()
        for view in params.views:
            display.show(render_snapshot(snapshot, view))
        return _result(1, snapshot)
    finally:
        fetcher.close()


def run_display_loop(
    repository: QuoteRepository,
    display: ConsoleDisplay,
    interval_seconds: float,
    cycles: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RefreshExecutionResult:
    """Refresh, show values, show changes, and repeat until ``cycles`` is reached."""
    completed = 0
    snapshot = repository.snapshot
    while cycles is None or completed < cycles:
        snapshot = repository.refresh()
        for view in (ViewMode.VALUE, ViewMode.CHANGE):
            display.show(render_snapshot(snapshot, view))
            sleep(interval_seconds)
        completed += 1
        LOGGER.debug("Display cycle %s done", completed)
    return _result(completed, snapshot)


def _result(cycles: int, snapshot: QuoteSnapshot) -> RefreshExecutionResult:
    return RefreshExecutionResult(
        cycles=cycles,
        all_succeeded=snapshot.all_succeeded,
        failed_symbols=list(snapshot.failed_symbols),
    )
