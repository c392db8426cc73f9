"""Result kinds reported by test frameworks and their textual forms."""

import logging
from collections.abc import Mapping
from enum import IntEnum

log = logging.getLogger(__name__)


class ResultKind(IntEnum):
    """Outcome category of a test result or diagnostic message.

    Values are ordered and stable: integer kinds received from tools are
    round-tripped through ``kind_from_int``.
    """

    PASS = 0
    FAIL = 1
    EXPECTED_FAIL = 2
    UNEXPECTED_PASS = 3
    SKIP = 4
    BLACKLISTED_PASS = 5
    BLACKLISTED_FAIL = 6
    BENCHMARK = 7
    MESSAGE_DEBUG = 8
    MESSAGE_WARN = 9
    MESSAGE_FATAL = 10

    # Bookkeeping pseudo-results, never displayed
    MESSAGE_INTERNAL = 11
    MESSAGE_DISABLED_TESTS = 12
    MESSAGE_TEST_CASE_START = 13
    MESSAGE_TEST_CASE_SUCCESS = 14
    MESSAGE_TEST_CASE_WARN = 15
    MESSAGE_TEST_CASE_FAIL = 16
    MESSAGE_TEST_CASE_END = 17
    MESSAGE_CURRENT_TEST = 18

    INVALID = 19

    FIRST_TYPE = PASS
    LAST_TYPE = INVALID
    INTERNAL_MESSAGES_BEGIN = MESSAGE_INTERNAL
    INTERNAL_MESSAGES_END = MESSAGE_CURRENT_TEST

    @property
    def is_internal(self) -> bool:
        """Whether this kind belongs to the internal messages range."""
        return (
            ResultKind.INTERNAL_MESSAGES_BEGIN
            <= self
            <= ResultKind.INTERNAL_MESSAGES_END
        )


TOKEN_TO_KIND: Mapping[str, ResultKind] = {
    "pass": ResultKind.PASS,
    "fail": ResultKind.FAIL,
    "xfail": ResultKind.EXPECTED_FAIL,
    "xpass": ResultKind.UNEXPECTED_PASS,
    "skip": ResultKind.SKIP,
    "qdebug": ResultKind.MESSAGE_DEBUG,
    "warn": ResultKind.MESSAGE_WARN,
    "qwarn": ResultKind.MESSAGE_WARN,
    "qfatal": ResultKind.MESSAGE_FATAL,
    "bpass": ResultKind.BLACKLISTED_PASS,
    "bfail": ResultKind.BLACKLISTED_FAIL,
}

KIND_TO_LABEL: Mapping[ResultKind, str] = {
    ResultKind.PASS: "PASS",
    ResultKind.FAIL: "FAIL",
    ResultKind.EXPECTED_FAIL: "XFAIL",
    ResultKind.UNEXPECTED_PASS: "XPASS",
    ResultKind.SKIP: "SKIP",
    ResultKind.BENCHMARK: "BENCH",
    ResultKind.MESSAGE_DEBUG: "DEBUG",
    ResultKind.MESSAGE_WARN: "WARN",
    ResultKind.MESSAGE_FATAL: "FATAL",
    ResultKind.BLACKLISTED_PASS: "BPASS",
    ResultKind.BLACKLISTED_FAIL: "BFAIL",
}

UNKNOWN_LABEL = "UNKNOWN"


def kind_from_token(token: str) -> ResultKind:
    """Map a tool token such as ``"xfail"`` to its result kind.

    Matching is exact and case-sensitive. Unrecognized tokens are logged and
    mapped to ``ResultKind.INVALID``.
    """
    if (kind := TOKEN_TO_KIND.get(token)) is not None:
        return kind

    log.debug("Unexpected test result: %s", token)
    return ResultKind.INVALID


def kind_from_int(raw: int) -> ResultKind:
    """Convert a raw integer to a result kind, INVALID when out of range."""
    if raw < ResultKind.FIRST_TYPE or raw > ResultKind.LAST_TYPE:
        return ResultKind.INVALID

    return ResultKind(raw)


def label_for(kind: ResultKind) -> str:
    """Return the short display label for a kind, empty for internal kinds."""
    if kind.is_internal:
        return ""
    return KIND_TO_LABEL.get(kind, UNKNOWN_LABEL)
