"""bouncespy: bounce notification classifier."""

from importlib import metadata

from .analyzer import analyze, analyze_message
from .codes import DESCRIPTIONS, STATUS_TABLE, compare, describe
from .finder import find_bounce_reason
from .spam import read_spam_score
from .types import ClassificationEntry, Comparison, Result, Severity, StatusCode


def _discover_version() -> str:
    """Return the installed package version, falling back to dev marker."""
    try:
        return metadata.version("bouncespy")
    except metadata.PackageNotFoundError:  # pragma: no cover - occurs in source checkouts
        return "0.0.0"


__all__ = [
    "__version__",
    "analyze",
    "analyze_message",
    "find_bounce_reason",
    "read_spam_score",
    "compare",
    "describe",
    "STATUS_TABLE",
    "DESCRIPTIONS",
    "ClassificationEntry",
    "Comparison",
    "Result",
    "Severity",
    "StatusCode",
]
__version__ = _discover_version()
