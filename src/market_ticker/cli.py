import argparse
import logging
import sys
from typing import Optional

from market_ticker.application.refresh_service import (
    RefreshExecutionParams,
    run_refresh_job,
)
from market_ticker.domain.models import ViewMode
from market_ticker.utils.logging_config import configure_logging

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PARTIAL = 2


def _build_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Market ticker for SPX, NDX and the 10y yield (Yahoo Finance)."
    )
    parser.add_argument(
        "--view",
        choices=["value", "change", "both"],
        default="both",
        help="View to print in one-shot mode. Default: both",
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help="Keep refreshing and alternate value/change views.",
    )
    parser.add_argument(
        "--cycles",
        type=int,
        default=None,
        help="Number of refresh cycles in loop mode (optional, default: forever).",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=2.0,
        help="Seconds each view stays on screen in loop mode. Default: 2",
    )
    parser.add_argument(
        "--pacing",
        type=float,
        default=1.0,
        help="Seconds to wait between symbol requests. Default: 1",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="HTTP request timeout in seconds. Default: 10",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS certificate verification.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level (DEBUG, INFO, WARNING, ERROR).",
    )
    return parser.parse_args(argv)


def _views(view: str) -> list:
    if view == "both":
        return [ViewMode.VALUE, ViewMode.CHANGE]
    return [ViewMode(view)]


def main(argv: Optional[list] = None) -> int:
    args = _build_args(argv)
    configure_logging(args.log_level)
    logger = logging.getLogger(__name__)

    params = RefreshExecutionParams(
        views=_views(args.view),
        loop=args.loop,
        cycles=args.cycles,
        interval_seconds=args.interval,
        pacing_seconds=args.pacing,
        timeout_seconds=args.timeout,
        verify_ssl=not args.insecure,
    )

    try:
        result = run_refresh_job(params)
    except KeyboardInterrupt:
        return EXIT_OK
    except Exception as exc:
        logger.exception("Ticker execution failed: %s", exc)
        return EXIT_ERROR

    if not result.all_succeeded:
        logger.warning("Symbols not refreshed: %s", ", ".join(result.failed_symbols))
        return EXIT_PARTIAL
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
