"""Load structured result records from JSON lines."""

import logging
from collections.abc import Iterable, Iterator

from pydantic import ValidationError

from autotest_results.kinds import ResultKind
from autotest_results.models.record import RESULT_RECORD_ADAPTER
from autotest_results.models.result import AnyTestResult, FaultyResult

log = logging.getLogger(__name__)


def summarize_errors(error: ValidationError) -> str:
    """Condense validation errors into a single line."""
    parts: list[str] = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def parse_result_line(line: str, line_number: int) -> AnyTestResult:
    """Turn one JSON record into a result value.

    Records that fail validation become a ``FaultyResult`` describing the
    problem, so the bad line is still shown to the user.
    """
    try:
        record = RESULT_RECORD_ADAPTER.validate_json(line)
    except ValidationError as e:
        summary = summarize_errors(e)
        log.warning("Malformed result record on line %d: %s", line_number, summary)
        return FaultyResult(
            kind=ResultKind.INVALID,
            description=(
                f"Malformed result record on line {line_number}: {summary}\n"
                f"{line.strip()}"
            ),
        )

    return record.to_result()


def load_results(lines: Iterable[str]) -> Iterator[AnyTestResult]:
    """Yield one result per non-blank line, in input order."""
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield parse_result_line(line, line_number)
