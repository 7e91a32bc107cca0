"""Core immutable data structures used throughout bouncespy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Severity(str, Enum):
    """Whether a bounce is transient (soft) or permanent (hard)."""

    SOFT = "soft"
    HARD = "hard"


class StatusCode(str, Enum):
    """Delivery status codes recognised in bounce bodies.

    Values are the exact wire strings: basic SMTP replies (RFC 821 section
    4.2.2) and enhanced status codes (RFC 3463 section 3).
    """

    SERVICE_NOT_AVAILABLE = "421"
    MAIL_ACTION_NOT_TAKEN = "450"
    ACTION_ABORTED_ERROR_PROCESSING = "451"
    ACTION_ABORTED_INSUFFICIENT_STORAGE = "452"
    CMD_SYNTAX_ERROR = "500"
    ARGUMENTS_SYNTAX_ERROR = "501"
    CMD_NOT_IMPLEMENTED = "502"
    BAD_CMD_SEQUENCE = "503"
    CMD_PARAM_NOT_IMPLEMENTED = "504"
    MAILBOX_UNAVAILABLE = "550"
    RECIPIENT_NOT_LOCAL = "551"
    ACTION_ABORTED_EXCEEDED_STORAGE_ALLOC = "552"
    MAILBOX_NAME_INVALID = "553"
    TRANSACTION_FAILED = "554"

    ADDRESS_DOESNT_EXIST = "5.0.0"
    OTHER_ADDRESS_ERROR = "5.1.0"
    BAD_DESTINATION_MAILBOX_ADDRESS = "5.1.1"
    BAD_DESTINATION_SYSTEM_ADDRESS = "5.1.2"
    BAD_DESTINATION_MAILBOX_ADDRESS_SYNTAX = "5.1.3"
    DESTINATION_MAILBOX_AMBIGUOUS = "5.1.4"
    DESTINATION_MAILBOX_ADDRESS_INVALID = "5.1.5"
    MAILBOX_MOVED = "5.1.6"
    BAD_SENDER_MAILBOX_ADDRESS_SYNTAX = "5.1.7"
    BAD_SENDER_SYSTEM_ADDRESS = "5.1.8"
    UNDEFINED_MAILBOX_ERROR = "5.2.0"
    MAILBOX_DISABLED = "5.2.1"
    MAILBOX_FULL = "5.2.2"
    MESSAGE_LEN_EXCEEDS_LIMIT = "5.2.3"
    MAILING_LIST_EXPANSION_PROBLEM = "5.2.4"
    UNDEFINED_MAIL_SYSTEM_STATUS = "5.3.0"
    MAIL_SYSTEM_FULL = "5.3.1"
    SYSTEM_NOT_ACCEPTING_NETWORK_MESSAGES = "5.3.2"
    SYSTEM_NOT_CAPABLE_OF_FEATURES = "5.3.3"
    MESSAGE_TOO_BIG_FOR_SYSTEM = "5.3.4"
    UNDEFINED_NETWORK_STATUS = "5.4.0"
    NO_ANSWER_FROM_HOST = "5.4.1"
    BAD_CONNECTION = "5.4.2"
    ROUTING_SERVER_FAILURE = "5.4.3"
    UNABLE_TO_ROUTE = "5.4.4"
    NETWORK_CONGESTION = "5.4.5"
    ROUTING_LOOP_DETECTED = "5.4.6"
    DELIVERY_TIME_EXPIRED = "5.4.7"
    UNDEFINED_PROTOCOL_STATUS = "5.5.0"
    INVALID_COMMAND = "5.5.1"
    SYNTAX_ERROR = "5.5.2"
    TOO_MANY_RECIPIENTS = "5.5.3"
    INVALID_COMMAND_ARGUMENTS = "5.5.4"
    WRONG_PROTOCOL_VERSION = "5.5.5"
    UNDEFINED_MEDIA_ERROR = "5.6.0"
    MEDIA_NOT_SUPPORTED = "5.6.1"
    CONVERSION_REQUIRED_AND_PROHIBITED = "5.6.2"
    CONVERSION_REQUIRED_BUT_NOT_SUPPORTED = "5.6.3"
    CONVERSION_WITH_LOSS_PERFORMED = "5.6.4"
    CONVERSION_FAILED = "5.6.5"
    UNDEFINED_SECURITY_STATUS = "5.7.0"
    MESSAGE_REFUSED = "5.7.1"
    MAILING_LIST_EXPANSION_PROHIBITED = "5.7.2"
    SECURITY_CONVERSION_REQUIRED_BUT_NOT_POSSIBLE = "5.7.3"
    SECURITY_FEATURES_NOT_SUPPORTED = "5.7.4"
    CRYPTO_FAILURE = "5.7.5"
    CRYPTO_ALGORITHM_NOT_SUPPORTED = "5.7.6"
    MESSAGE_INTEGRITY_FAILURE = "5.7.7"

    # Synthetic "hard bounce, code unknown" entry; never parsed from input.
    UNDEFINED_CODE = "9.1.1"

    # No code identified in the message.
    NOT_FOUND = ""


class Comparison(IntEnum):
    """Outcome of comparing the specificity of two status codes."""

    BOTH_ABSENT = -2
    LESS_SPECIFIC = -1
    EQUAL = 0
    MORE_SPECIFIC = 1


@dataclass(frozen=True)
class ClassificationEntry:
    """Severity of a status code and whether it is an enhanced code."""

    severity: Severity
    specific: bool


@dataclass(frozen=True)
class Result:
    """Outcome of analysing a single bounce message."""

    severity: Severity
    reason: StatusCode
    spam_score: float

    @property
    def description(self) -> str:
        from .codes import describe

        return describe(self.reason)


__all__ = [
    "Severity",
    "StatusCode",
    "Comparison",
    "ClassificationEntry",
    "Result",
]
