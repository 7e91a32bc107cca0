"""Top-level bounce analysis and the RFC822 message adapter."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from email import policy
from email.message import Message
from email.parser import BytesParser

from .codes import severity_of
from .finder import find_bounce_reason
from .spam import SPAM_SCORE_HEADER, Headers, read_spam_score
from .types import Result, StatusCode

LOGGER = logging.getLogger(__name__)

DELIVERY_STATUS_TYPE = "message/delivery-status"
# Embedded copies of the bounced mail; their text would mislead the finder.
ORIGINAL_MESSAGE_TYPES = frozenset({"message/rfc822", "text/rfc822-headers"})


def analyze(
    headers: Headers | None,
    body: bytes | str,
    *,
    spam_header: str = SPAM_SCORE_HEADER,
) -> Result:
    """Classify a bounce from its headers and plain-text body."""

    reason = find_bounce_reason(body)
    if reason is StatusCode.NOT_FOUND:
        LOGGER.debug("No status code found; falling back to a hard bounce.")
    return Result(
        severity=severity_of(reason),
        reason=reason,
        spam_score=read_spam_score(headers, spam_header),
    )


def analyze_message(
    message: Message | bytes | str,
    *,
    spam_header: str = SPAM_SCORE_HEADER,
) -> Result:
    """Classify a full RFC822 message, using its own headers for the spam score."""

    parsed = _parse_message(message)
    return analyze(parsed, extract_body(parsed), spam_header=spam_header)


def extract_body(message: Message) -> bytes:
    """Return the bounce text of a message as UTF-8 bytes.

    Plain-text parts and delivery-status blocks are joined in document order;
    HTML parts are used only when no plain-text part exists.
    """

    plain: list[str] = []
    html: list[str] = []
    for part in _iter_bounce_parts(message):
        if part.get_content_type() == DELIVERY_STATUS_TYPE:
            plain.append(_render_delivery_status(part))
            continue
        payload = part.get_payload(decode=True)
        if payload is None or not isinstance(payload, (bytes, bytearray)):
            continue
        decoded = _decode_bytes(bytes(payload), part.get_content_charset())
        content_type = part.get_content_type()
        if content_type == "text/plain":
            plain.append(decoded)
        elif content_type == "text/html":
            html.append(decoded)

    source = plain if plain else html
    return "\n".join(source).encode("utf-8")


def _parse_message(message: Message | bytes | str) -> Message:
    if isinstance(message, Message):
        return message
    if isinstance(message, str):
        message = message.encode("utf-8", errors="replace")
    return BytesParser(policy=policy.default).parsebytes(message)


def _iter_bounce_parts(message: Message) -> Iterable[Message]:
    content_type = message.get_content_type()
    if content_type in ORIGINAL_MESSAGE_TYPES:
        return
    if content_type == DELIVERY_STATUS_TYPE:
        yield message
        return
    if message.is_multipart():
        for part in message.get_payload():
            yield from _iter_bounce_parts(part)
        return
    if (message.get_content_disposition() or "").lower() == "attachment":
        return
    yield message


def _render_delivery_status(part: Message) -> str:
    payload = part.get_payload()
    if isinstance(payload, list):
        blocks: Sequence[Message] = payload
        return "\n".join(_render_fields(block) for block in blocks)
    if isinstance(payload, str):
        return payload
    return ""


def _render_fields(block: Message) -> str:
    return "\n".join(f"{name}: {value}" for name, value in block.items())


def _decode_bytes(data: bytes, charset: str | None) -> str:
    candidates: list[str] = []
    if charset:
        candidates.append(charset)
    candidates.extend(["utf-8", "latin-1"])
    for encoding in candidates:
        try:
            return data.decode(encoding, errors="replace")
        except LookupError:
            continue
    return data.decode("utf-8", errors="ignore")


__all__ = ["analyze", "analyze_message", "extract_body"]
