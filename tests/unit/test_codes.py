from __future__ import annotations

import pytest

from bouncespy.codes import (
    DESCRIPTIONS,
    STATUS_TABLE,
    compare,
    describe,
    description_of,
    is_specific,
    lookup,
    severity_of,
)
from bouncespy.types import Comparison, Severity, StatusCode

ENHANCED = [code for code in StatusCode if "." in code.value]
BASIC = [code for code in StatusCode if code.value.isdigit()]


def test_every_code_has_entry_and_description() -> None:
    for code in StatusCode:
        if code is StatusCode.NOT_FOUND:
            continue
        assert code in STATUS_TABLE
        assert DESCRIPTIONS[code]


def test_not_found_has_no_entry() -> None:
    assert StatusCode.NOT_FOUND not in STATUS_TABLE
    assert lookup(StatusCode.NOT_FOUND) is None
    assert lookup("") is None


def test_table_sizes() -> None:
    assert len(BASIC) == 14
    # 48 RFC 3463 codes plus the synthetic fallback
    assert len(ENHANCED) == 49
    assert len(STATUS_TABLE) == 63


def test_specificity_follows_code_family() -> None:
    assert all(STATUS_TABLE[code].specific for code in ENHANCED)
    assert not any(STATUS_TABLE[code].specific for code in BASIC)


def test_soft_codes() -> None:
    soft = {code.value for code, entry in STATUS_TABLE.items() if entry.severity is Severity.SOFT}
    assert soft == {"421", "450", "451", "452", "5.2.0", "5.2.1", "5.2.2", "5.3.1", "5.4.5", "5.5.3"}


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        STATUS_TABLE[StatusCode.MAILBOX_FULL] = STATUS_TABLE[StatusCode.MAILBOX_MOVED]  # type: ignore[index]


def test_lookup_accepts_wire_strings() -> None:
    entry = lookup("5.1.1")
    assert entry is not None
    assert entry.severity is Severity.HARD
    assert entry.specific is True
    assert lookup("5.9.9") is None
    assert is_specific("garbage") is False


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (StatusCode.NOT_FOUND, StatusCode.NOT_FOUND, Comparison.BOTH_ABSENT),
        (StatusCode.SERVICE_NOT_AVAILABLE, StatusCode.CRYPTO_FAILURE, Comparison.LESS_SPECIFIC),
        (StatusCode.NOT_FOUND, StatusCode.CRYPTO_FAILURE, Comparison.LESS_SPECIFIC),
        (StatusCode.MAILBOX_UNAVAILABLE, StatusCode.MAILBOX_UNAVAILABLE, Comparison.EQUAL),
        (StatusCode.CRYPTO_FAILURE, StatusCode.CRYPTO_FAILURE, Comparison.EQUAL),
        (StatusCode.ADDRESS_DOESNT_EXIST, StatusCode.MAILBOX_UNAVAILABLE, Comparison.MORE_SPECIFIC),
        (StatusCode.ADDRESS_DOESNT_EXIST, StatusCode.NOT_FOUND, Comparison.MORE_SPECIFIC),
        (StatusCode.MAILBOX_UNAVAILABLE, StatusCode.NOT_FOUND, Comparison.EQUAL),
    ],
)
def test_compare(first: StatusCode, second: StatusCode, expected: Comparison) -> None:
    assert compare(first, second) is expected


def test_compare_enhanced_against_basic_for_all_pairs() -> None:
    for enhanced in ENHANCED:
        for basic in BASIC:
            assert compare(enhanced, basic) is Comparison.MORE_SPECIFIC
            assert compare(basic, enhanced) is Comparison.LESS_SPECIFIC
    for code in StatusCode:
        if code is not StatusCode.NOT_FOUND:
            assert compare(code, code) is Comparison.EQUAL


def test_severity_defaults_to_hard_without_entry() -> None:
    assert severity_of(StatusCode.NOT_FOUND) is Severity.HARD
    assert severity_of("4.4.4") is Severity.HARD
    assert severity_of(StatusCode.MAILBOX_FULL) is Severity.SOFT


def test_describe() -> None:
    assert describe(StatusCode.NOT_FOUND) == "no bounce reason found"
    assert describe(StatusCode.BAD_DESTINATION_MAILBOX_ADDRESS) == (
        "5.1.1 - bad destination mailbox address"
    )
    assert describe("421") == "421 - service not available"
    assert describe("not-a-code") == "no bounce reason found"
    assert description_of("9.1.1") == "hard bounce with no bounce code found"
    assert description_of("nope") is None
