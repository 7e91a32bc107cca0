"""Classification and description tables for delivery status codes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .types import ClassificationEntry, Comparison, Severity, StatusCode

NOT_FOUND_DESCRIPTION = "no bounce reason found"
FALLBACK_SEVERITY = Severity.HARD

_SOFT_BASIC = ClassificationEntry(Severity.SOFT, specific=False)
_HARD_BASIC = ClassificationEntry(Severity.HARD, specific=False)
_SOFT = ClassificationEntry(Severity.SOFT, specific=True)
_HARD = ClassificationEntry(Severity.HARD, specific=True)

STATUS_TABLE: Mapping[StatusCode, ClassificationEntry] = MappingProxyType(
    {
        StatusCode.SERVICE_NOT_AVAILABLE: _SOFT_BASIC,
        StatusCode.MAIL_ACTION_NOT_TAKEN: _SOFT_BASIC,
        StatusCode.ACTION_ABORTED_ERROR_PROCESSING: _SOFT_BASIC,
        StatusCode.ACTION_ABORTED_INSUFFICIENT_STORAGE: _SOFT_BASIC,
        StatusCode.CMD_SYNTAX_ERROR: _HARD_BASIC,
        StatusCode.ARGUMENTS_SYNTAX_ERROR: _HARD_BASIC,
        StatusCode.CMD_NOT_IMPLEMENTED: _HARD_BASIC,
        StatusCode.BAD_CMD_SEQUENCE: _HARD_BASIC,
        StatusCode.CMD_PARAM_NOT_IMPLEMENTED: _HARD_BASIC,
        StatusCode.MAILBOX_UNAVAILABLE: _HARD_BASIC,
        StatusCode.RECIPIENT_NOT_LOCAL: _HARD_BASIC,
        StatusCode.ACTION_ABORTED_EXCEEDED_STORAGE_ALLOC: _HARD_BASIC,
        StatusCode.MAILBOX_NAME_INVALID: _HARD_BASIC,
        StatusCode.TRANSACTION_FAILED: _HARD_BASIC,
        StatusCode.ADDRESS_DOESNT_EXIST: _HARD,
        StatusCode.OTHER_ADDRESS_ERROR: _HARD,
        StatusCode.BAD_DESTINATION_MAILBOX_ADDRESS: _HARD,
        StatusCode.BAD_DESTINATION_SYSTEM_ADDRESS: _HARD,
        StatusCode.BAD_DESTINATION_MAILBOX_ADDRESS_SYNTAX: _HARD,
        StatusCode.DESTINATION_MAILBOX_AMBIGUOUS: _HARD,
        StatusCode.DESTINATION_MAILBOX_ADDRESS_INVALID: _HARD,
        StatusCode.MAILBOX_MOVED: _HARD,
        StatusCode.BAD_SENDER_MAILBOX_ADDRESS_SYNTAX: _HARD,
        StatusCode.BAD_SENDER_SYSTEM_ADDRESS: _HARD,
        StatusCode.UNDEFINED_MAILBOX_ERROR: _SOFT,
        StatusCode.MAILBOX_DISABLED: _SOFT,
        StatusCode.MAILBOX_FULL: _SOFT,
        StatusCode.MESSAGE_LEN_EXCEEDS_LIMIT: _HARD,
        StatusCode.MAILING_LIST_EXPANSION_PROBLEM: _HARD,
        StatusCode.UNDEFINED_MAIL_SYSTEM_STATUS: _HARD,
        StatusCode.MAIL_SYSTEM_FULL: _SOFT,
        StatusCode.SYSTEM_NOT_ACCEPTING_NETWORK_MESSAGES: _HARD,
        StatusCode.SYSTEM_NOT_CAPABLE_OF_FEATURES: _HARD,
        StatusCode.MESSAGE_TOO_BIG_FOR_SYSTEM: _HARD,
        StatusCode.UNDEFINED_NETWORK_STATUS: _HARD,
        StatusCode.NO_ANSWER_FROM_HOST: _HARD,
        StatusCode.BAD_CONNECTION: _HARD,
        StatusCode.ROUTING_SERVER_FAILURE: _HARD,
        StatusCode.UNABLE_TO_ROUTE: _HARD,
        StatusCode.NETWORK_CONGESTION: _SOFT,
        StatusCode.ROUTING_LOOP_DETECTED: _HARD,
        StatusCode.DELIVERY_TIME_EXPIRED: _HARD,
        StatusCode.UNDEFINED_PROTOCOL_STATUS: _HARD,
        StatusCode.INVALID_COMMAND: _HARD,
        StatusCode.SYNTAX_ERROR: _HARD,
        StatusCode.TOO_MANY_RECIPIENTS: _SOFT,
        StatusCode.INVALID_COMMAND_ARGUMENTS: _HARD,
        StatusCode.WRONG_PROTOCOL_VERSION: _HARD,
        StatusCode.UNDEFINED_MEDIA_ERROR: _HARD,
        StatusCode.MEDIA_NOT_SUPPORTED: _HARD,
        StatusCode.CONVERSION_REQUIRED_AND_PROHIBITED: _HARD,
        StatusCode.CONVERSION_REQUIRED_BUT_NOT_SUPPORTED: _HARD,
        StatusCode.CONVERSION_WITH_LOSS_PERFORMED: _HARD,
        StatusCode.CONVERSION_FAILED: _HARD,
        StatusCode.UNDEFINED_SECURITY_STATUS: _HARD,
        StatusCode.MESSAGE_REFUSED: _HARD,
        StatusCode.MAILING_LIST_EXPANSION_PROHIBITED: _HARD,
        StatusCode.SECURITY_CONVERSION_REQUIRED_BUT_NOT_POSSIBLE: _HARD,
        StatusCode.SECURITY_FEATURES_NOT_SUPPORTED: _HARD,
        StatusCode.CRYPTO_FAILURE: _HARD,
        StatusCode.CRYPTO_ALGORITHM_NOT_SUPPORTED: _HARD,
        StatusCode.MESSAGE_INTEGRITY_FAILURE: _HARD,
        StatusCode.UNDEFINED_CODE: _HARD,
    }
)

DESCRIPTIONS: Mapping[StatusCode, str] = MappingProxyType(
    {
        StatusCode.SERVICE_NOT_AVAILABLE: "service not available",
        StatusCode.MAIL_ACTION_NOT_TAKEN: "mail action not taken: mailbox unavailable",
        StatusCode.ACTION_ABORTED_ERROR_PROCESSING: "action aborted: error in processing",
        StatusCode.ACTION_ABORTED_INSUFFICIENT_STORAGE: (
            "action aborted: insufficient system storage"
        ),
        StatusCode.CMD_SYNTAX_ERROR: (
            "the server could not recognize the command due to a syntax error"
        ),
        StatusCode.ARGUMENTS_SYNTAX_ERROR: "a syntax error was encountered in command arguments",
        StatusCode.CMD_NOT_IMPLEMENTED: "this command is not implemented",
        StatusCode.BAD_CMD_SEQUENCE: "the server has encountered a bad sequence of commands",
        StatusCode.CMD_PARAM_NOT_IMPLEMENTED: "a command parameter is not implemented",
        StatusCode.MAILBOX_UNAVAILABLE: "user's mailbox was unavailable (such as not found)",
        StatusCode.RECIPIENT_NOT_LOCAL: "the recipient is not local to the server",
        StatusCode.ACTION_ABORTED_EXCEEDED_STORAGE_ALLOC: (
            "the action was aborted due to exceeded storage allocation"
        ),
        StatusCode.MAILBOX_NAME_INVALID: (
            "the command was aborted because the mailbox name is invalid"
        ),
        StatusCode.TRANSACTION_FAILED: "the transaction failed for some unstated reason",
        StatusCode.ADDRESS_DOESNT_EXIST: "address does not exist",
        StatusCode.OTHER_ADDRESS_ERROR: "other address status",
        StatusCode.BAD_DESTINATION_MAILBOX_ADDRESS: "bad destination mailbox address",
        StatusCode.BAD_DESTINATION_SYSTEM_ADDRESS: "bad destination system address",
        StatusCode.BAD_DESTINATION_MAILBOX_ADDRESS_SYNTAX: (
            "bad destination mailbox address syntax"
        ),
        StatusCode.DESTINATION_MAILBOX_AMBIGUOUS: "destination mailbox address ambiguous",
        StatusCode.DESTINATION_MAILBOX_ADDRESS_INVALID: "destination mailbox address invalid",
        StatusCode.MAILBOX_MOVED: "mailbox has moved",
        StatusCode.BAD_SENDER_MAILBOX_ADDRESS_SYNTAX: "bad sender's mailbox address syntax",
        StatusCode.BAD_SENDER_SYSTEM_ADDRESS: "bad sender's system address",
        StatusCode.UNDEFINED_MAILBOX_ERROR: "other or undefined mailbox status",
        StatusCode.MAILBOX_DISABLED: "mailbox disabled, not accepting messages",
        StatusCode.MAILBOX_FULL: "mailbox full",
        StatusCode.MESSAGE_LEN_EXCEEDS_LIMIT: "message length exceeds administrative limit",
        StatusCode.MAILING_LIST_EXPANSION_PROBLEM: "mailing list expansion problem",
        StatusCode.UNDEFINED_MAIL_SYSTEM_STATUS: "other or undefined mail system status",
        StatusCode.MAIL_SYSTEM_FULL: "mail system full",
        StatusCode.SYSTEM_NOT_ACCEPTING_NETWORK_MESSAGES: "system not accepting network messages",
        StatusCode.SYSTEM_NOT_CAPABLE_OF_FEATURES: "system not capable of selected features",
        StatusCode.MESSAGE_TOO_BIG_FOR_SYSTEM: "message too big for system",
        StatusCode.UNDEFINED_NETWORK_STATUS: "other or undefined network or routing status",
        StatusCode.NO_ANSWER_FROM_HOST: "no answer from host",
        StatusCode.BAD_CONNECTION: "bad connection",
        StatusCode.ROUTING_SERVER_FAILURE: "routing server failure",
        StatusCode.UNABLE_TO_ROUTE: "unable to route",
        StatusCode.NETWORK_CONGESTION: "network congestion",
        StatusCode.ROUTING_LOOP_DETECTED: "routing loop detected",
        StatusCode.DELIVERY_TIME_EXPIRED: "delivery time expired",
        StatusCode.UNDEFINED_PROTOCOL_STATUS: "other or undefined protocol status",
        StatusCode.INVALID_COMMAND: "invalid command",
        StatusCode.SYNTAX_ERROR: "syntax error",
        StatusCode.TOO_MANY_RECIPIENTS: "too many recipients",
        StatusCode.INVALID_COMMAND_ARGUMENTS: "invalid command arguments",
        StatusCode.WRONG_PROTOCOL_VERSION: "wrong protocol version",
        StatusCode.UNDEFINED_MEDIA_ERROR: "other or undefined media error",
        StatusCode.MEDIA_NOT_SUPPORTED: "media not supported",
        StatusCode.CONVERSION_REQUIRED_AND_PROHIBITED: "conversion required and prohibited",
        StatusCode.CONVERSION_REQUIRED_BUT_NOT_SUPPORTED: "conversion required but not supported",
        StatusCode.CONVERSION_WITH_LOSS_PERFORMED: "conversion with loss performed",
        StatusCode.CONVERSION_FAILED: "conversion failed",
        StatusCode.UNDEFINED_SECURITY_STATUS: "other or undefined security status",
        StatusCode.MESSAGE_REFUSED: "delivery not authorized, message refused",
        StatusCode.MAILING_LIST_EXPANSION_PROHIBITED: "mailing list expansion prohibited",
        StatusCode.SECURITY_CONVERSION_REQUIRED_BUT_NOT_POSSIBLE: (
            "security conversion required but not possible"
        ),
        StatusCode.SECURITY_FEATURES_NOT_SUPPORTED: "security features not supported",
        StatusCode.CRYPTO_FAILURE: "cryptographic failure",
        StatusCode.CRYPTO_ALGORITHM_NOT_SUPPORTED: "cryptographic algorithm not supported",
        StatusCode.MESSAGE_INTEGRITY_FAILURE: "message integrity failure",
        StatusCode.UNDEFINED_CODE: "hard bounce with no bounce code found",
    }
)


def to_status_code(value: StatusCode | str) -> StatusCode | None:
    """Return the StatusCode member for a wire string, or None if unknown."""

    if isinstance(value, StatusCode):
        return value
    try:
        return StatusCode(value)
    except ValueError:
        return None


def lookup(code: StatusCode | str) -> ClassificationEntry | None:
    """Return the table entry for a code, or None for absent/unknown codes."""

    member = to_status_code(code)
    if member is None:
        return None
    return STATUS_TABLE.get(member)


def is_specific(code: StatusCode | str) -> bool:
    """Return True for enhanced codes; absent or unknown codes are not specific."""

    entry = lookup(code)
    return entry.specific if entry is not None else False


def severity_of(code: StatusCode | str) -> Severity:
    """Return the severity of a code, defaulting to hard when it has no entry."""

    entry = lookup(code)
    if entry is None:
        return FALLBACK_SEVERITY
    return entry.severity


def description_of(code: StatusCode | str) -> str | None:
    member = to_status_code(code)
    if member is None:
        return None
    return DESCRIPTIONS.get(member)


def describe(code: StatusCode | str) -> str:
    """Return ``"<code> - <description>"`` for display."""

    member = to_status_code(code)
    if member is None or member is StatusCode.NOT_FOUND:
        return NOT_FOUND_DESCRIPTION
    return f"{member.value} - {DESCRIPTIONS.get(member, '')}"


def compare(first: StatusCode | str, second: StatusCode | str) -> Comparison:
    """Compare the specificity of ``first`` against ``second``.

    - both absent: BOTH_ABSENT
    - same specificity (both enhanced, both basic, or basic vs absent): EQUAL
    - only ``first`` enhanced: MORE_SPECIFIC
    - only ``second`` enhanced: LESS_SPECIFIC
    """

    if first == StatusCode.NOT_FOUND and second == StatusCode.NOT_FOUND:
        return Comparison.BOTH_ABSENT

    first_specific = is_specific(first)
    second_specific = is_specific(second)
    if first_specific == second_specific:
        return Comparison.EQUAL
    if first_specific:
        return Comparison.MORE_SPECIFIC
    return Comparison.LESS_SPECIFIC


__all__ = [
    "STATUS_TABLE",
    "DESCRIPTIONS",
    "NOT_FOUND_DESCRIPTION",
    "FALLBACK_SEVERITY",
    "to_status_code",
    "lookup",
    "is_specific",
    "severity_of",
    "description_of",
    "describe",
    "compare",
]
