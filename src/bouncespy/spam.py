"""Spam score header reader."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping, Sequence
from email.message import Message
from typing import Union

LOGGER = logging.getLogger(__name__)

SPAM_SCORE_HEADER = "X-Spam-Score"
# ASCII decimal float, optionally signed, with optional exponent.
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

HeaderValue = Union[str, Sequence[str]]
Headers = Union[Message, Mapping[str, HeaderValue]]


def read_spam_score(headers: Headers | None, name: str = SPAM_SCORE_HEADER) -> float:
    """Return the spam score header as a float, 0.0 when absent or malformed."""

    if headers is None:
        return 0.0
    raw = _first_value(headers, name)
    if raw is None:
        return 0.0
    text = str(raw).strip()
    if not text:
        return 0.0
    if DECIMAL_PATTERN.fullmatch(text) is None:
        LOGGER.debug("Ignoring unparseable %s header: %r", name, text)
        return 0.0
    score = float(text)
    if not math.isfinite(score):
        LOGGER.debug("Ignoring non-finite %s header: %r", name, text)
        return 0.0
    return score


def _first_value(headers: Headers, name: str) -> str | None:
    if isinstance(headers, Message):
        return headers.get(name)

    value = headers.get(name)
    if value is None:
        lowered = name.lower()
        for key, candidate in headers.items():
            if key.lower() == lowered:
                value = candidate
                break
    if value is None or isinstance(value, str):
        return value
    return value[0] if value else None


__all__ = ["SPAM_SCORE_HEADER", "read_spam_score"]
