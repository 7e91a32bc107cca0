"""Locate the status code of a bounce by scanning its body bottom-up."""

from __future__ import annotations

import logging

from .lines import analyze_line
from .types import StatusCode

LOGGER = logging.getLogger(__name__)

STATUS_PREFIX = "status:"
MARKER_PHRASES = (
    "the reason of the problem:",
    "the reason for the problem:",
    "the error that the other server returned was:",
)


def find_bounce_reason(body: bytes | str) -> StatusCode:
    """Return the status code found in a bounce body, or NOT_FOUND.

    Some servers put a generic code near the top of the notification and the
    precise one further down, so lines are scanned from the end and the first
    hit wins. A line is a candidate when it is a ``Status:`` field or when it
    directly follows one of the known marker phrases.
    """

    if isinstance(body, (bytes, bytearray)):
        text = bytes(body).decode("utf-8", errors="replace")
    else:
        text = body
    lines = text.lower().split("\n")

    for index in range(len(lines) - 1, -1, -1):
        line = lines[index].strip()
        if line.startswith(STATUS_PREFIX):
            reason = analyze_line(line[len(STATUS_PREFIX) :])
            if reason is not StatusCode.NOT_FOUND:
                LOGGER.debug("Status field on line %d yielded %s", index + 1, reason.value)
                return reason
        elif line.endswith(MARKER_PHRASES) and index + 1 < len(lines):
            reason = analyze_line(lines[index + 1])
            if reason is not StatusCode.NOT_FOUND:
                LOGGER.debug("Line after marker on line %d yielded %s", index + 1, reason.value)
                return reason

    return StatusCode.NOT_FOUND


__all__ = ["find_bounce_reason", "MARKER_PHRASES", "STATUS_PREFIX"]
