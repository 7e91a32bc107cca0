"""Helpers for reading bounce messages from files and maildir folders."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from email import policy
from email.message import EmailMessage
from email.parser import BytesParser
from pathlib import Path

LOGGER = logging.getLogger(__name__)

MAILDIR_SUBDIRS = ("cur", "new", "tmp")
# tmp/ holds messages still being delivered.
MESSAGE_SUBDIRS = ("new", "cur")


class MaildirError(RuntimeError):
    """Raised when message files or maildirs cannot be read."""


def is_maildir(path: Path) -> bool:
    """Return True if the directory has the cur/new/tmp layout."""

    root = path.expanduser()
    return root.is_dir() and all((root / subdir).is_dir() for subdir in MAILDIR_SUBDIRS)


def iter_maildir_messages(maildir: Path) -> Iterator[Path]:
    """Yield message files from new/ then cur/, sorted by name."""

    root = maildir.expanduser()
    if not is_maildir(root):
        raise MaildirError(f"Not a maildir: {root}")
    for subdir in MESSAGE_SUBDIRS:
        for entry in sorted((root / subdir).iterdir()):
            if entry.is_file() and not entry.name.startswith("."):
                yield entry


def collect_message_paths(paths: Iterable[Path]) -> list[Path]:
    """Expand maildir arguments into their message files, keeping file arguments."""

    collected: list[Path] = []
    for path in paths:
        resolved = path.expanduser()
        if resolved.is_dir():
            messages = list(iter_maildir_messages(resolved))
            LOGGER.debug("Found %d message(s) in maildir %s", len(messages), resolved)
            collected.extend(messages)
        elif resolved.is_file():
            collected.append(resolved)
        else:
            raise MaildirError(f"Message file does not exist: {resolved}")
    return collected


def read_message(path: Path) -> EmailMessage:
    """Parse a message file into an EmailMessage instance."""

    file_path = Path(path)
    if not file_path.is_file():
        raise MaildirError(f"Message file does not exist: {file_path}")
    parser = BytesParser(policy=policy.default)
    with file_path.open("rb") as handle:
        return parser.parse(handle)


__all__ = [
    "MAILDIR_SUBDIRS",
    "MaildirError",
    "is_maildir",
    "iter_maildir_messages",
    "collect_message_paths",
    "read_message",
]
