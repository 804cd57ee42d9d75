"""Marker based scanning of quote responses.

The response body is never parsed as a document. Each field is located by the
literal key text that precedes it and read up to the next separator, so
truncated or reordered bodies still yield whatever fields are present.
"""
import logging
import math

LOGGER = logging.getLogger(__name__)

_TERMINATORS = (",", "}", "]")
_QUOTE_CHARS = ("\"", "'")


def extract_number(text: str, marker: str) -> float:
    raw_value = _slice_after_marker(text, marker)
    if not raw_value:
        return 0.0
    try:
        value = float(raw_value)
    except ValueError:
        LOGGER.debug("Unparsable value for marker %s: %r", marker, raw_value)
        return 0.0
    return value if math.isfinite(value) else 0.0


def extract_text(text: str, marker: str) -> str:
    return _slice_after_marker(text, marker)


def _slice_after_marker(text: str, marker: str) -> str:
    if not text or not marker:
        return ""

    start = text.find(marker)
    if start < 0:
        return ""
    start += len(marker)

    end = start
    while end < len(text) and text[end] not in _TERMINATORS:
        end += 1

    return _clean(text[start:end])


def _clean(raw_value: str) -> str:
    cleaned = raw_value.strip()
    if cleaned[:1] in _QUOTE_CHARS:
        cleaned = cleaned[1:]
    if cleaned[-1:] in _QUOTE_CHARS:
        cleaned = cleaned[:-1]
    if cleaned.startswith(":"):
        cleaned = cleaned[1:]
    return cleaned.strip()
