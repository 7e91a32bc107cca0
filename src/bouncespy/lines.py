"""Per-line status code extraction."""

from __future__ import annotations

from .codes import STATUS_TABLE, compare, to_status_code
from .types import Comparison, StatusCode


def normalize(line: str) -> str:
    """Turn dashes into spaces and collapse doubled spaces (two passes).

    Servers render continuation replies as ``550-5.1.1``; after this step the
    basic and enhanced codes are separate tokens. Runs of four or more spaces
    are only partially collapsed.
    """

    line = line.replace("-", " ")
    return _collapse_spaces(_collapse_spaces(line))


def parse_status(token: str) -> StatusCode:
    """Return the StatusCode a token spells, or NOT_FOUND.

    Only codes present in the classification table are recognised. The
    synthetic fallback code is never read from text.
    """

    member = to_status_code(token.strip())
    if member is None or member is StatusCode.UNDEFINED_CODE or member not in STATUS_TABLE:
        return StatusCode.NOT_FOUND
    return member


def analyze_line(line: str) -> StatusCode:
    """Return the most specific of the first two status tokens on a line."""

    parts = normalize(line).split(" ")
    first = parse_status(parts[0]) if parts else StatusCode.NOT_FOUND
    second = parse_status(parts[1]) if len(parts) > 1 else StatusCode.NOT_FOUND

    outcome = compare(first, second)
    if outcome is Comparison.LESS_SPECIFIC:
        return second
    if outcome in (Comparison.MORE_SPECIFIC, Comparison.EQUAL):
        return first
    return StatusCode.NOT_FOUND


def _collapse_spaces(line: str) -> str:
    return line.replace("  ", " ")


__all__ = ["normalize", "parse_status", "analyze_line"]
