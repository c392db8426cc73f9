"""Tests for result values and their output strings."""

import dataclasses

import pytest

from autotest_results.kinds import ResultKind
from autotest_results.models.result import (
    FaultyResult,
    GTestResult,
    QTestResult,
    TestResult,
)
from autotest_results.testing.factories import (
    GTestResultFactory,
    QTestResultFactory,
    TestResultFactory,
)

MULTI_LINE = "line1\nline2\nline3"
BENCH_DESCRIPTION = "0.5 msecs per iteration (total: 50, iterations: 100)"

LABELLED_KINDS = [
    ResultKind.PASS,
    ResultKind.FAIL,
    ResultKind.EXPECTED_FAIL,
    ResultKind.UNEXPECTED_PASS,
    ResultKind.BLACKLISTED_FAIL,
    ResultKind.BLACKLISTED_PASS,
]


class TestGenericResult:
    """Tests for TestResult.output_string."""

    def test_unselected_shows_first_line(self) -> None:
        """Shows only the first description line when not selected."""
        result = TestResult(kind=ResultKind.MESSAGE_WARN, description=MULTI_LINE)

        assert result.output_string(False) == "line1"

    def test_selected_shows_full_description(self) -> None:
        """Shows the description unchanged when selected."""
        result = TestResult(kind=ResultKind.MESSAGE_WARN, description=MULTI_LINE)

        assert result.output_string(True) == MULTI_LINE

    @pytest.mark.parametrize("selected", [True, False])
    def test_empty_description(self, selected: bool) -> None:
        """Renders an empty description as an empty string."""
        assert TestResult(kind=ResultKind.PASS).output_string(selected) == ""

    def test_first_line_does_not_modify_description(self) -> None:
        """Extracts the first line without touching the description."""
        result = TestResultFactory.build(description=MULTI_LINE)

        assert result.first_line == "line1"
        assert result.description == MULTI_LINE

    def test_defaults(self) -> None:
        """Defaults to an unnamed invalid result."""
        result = TestResult()

        assert result.name == ""
        assert result.kind is ResultKind.INVALID
        assert result.description == ""

    def test_is_immutable(self) -> None:
        """Rejects attribute assignment after construction."""
        result = TestResultFactory.build()

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.kind = ResultKind.FAIL  # type: ignore[misc]


class TestFaultyResult:
    """Tests for FaultyResult."""

    def test_built_from_kind_and_description(self) -> None:
        """Keeps kind and description, leaves the name empty."""
        result = FaultyResult(kind=ResultKind.INVALID, description="bad\nline")

        assert result.name == ""
        assert result.kind is ResultKind.INVALID
        assert result.output_string(False) == "bad"
        assert result.output_string(True) == "bad\nline"


class TestQTestResult:
    """Tests for QTestResult.output_string."""

    def test_pass_without_tag_or_description(self) -> None:
        """Renders class and function joined by '::'."""
        result = QTestResult(
            name="Suite", function_name="testFoo", kind=ResultKind.PASS
        )

        assert result.output_string(False) == "Suite::testFoo"

    def test_selected_with_tag_and_description(self) -> None:
        """Appends the data tag and, when selected, the description."""
        result = QTestResult(
            name="Suite",
            function_name="testFoo",
            data_tag="row2",
            kind=ResultKind.PASS,
            description="assertion failed",
        )

        assert result.output_string(True) == "Suite::testFoo (row2)\nassertion failed"

    @pytest.mark.parametrize("kind", LABELLED_KINDS)
    def test_unselected_hides_description(self, kind: ResultKind) -> None:
        """Omits the description when not selected."""
        result = QTestResultFactory.build(
            name="Suite",
            function_name="testFoo",
            data_tag="",
            kind=kind,
            description="some detail",
        )

        assert result.output_string(False) == "Suite::testFoo"

    @pytest.mark.parametrize("kind", LABELLED_KINDS)
    def test_selected_empty_description_adds_nothing(self, kind: ResultKind) -> None:
        """Adds no trailing newline for an empty description."""
        result = QTestResultFactory.build(
            name="Suite",
            function_name="testFoo",
            data_tag="",
            kind=kind,
            description="",
        )

        assert result.output_string(True) == "Suite::testFoo"

    def test_benchmark_unselected(self) -> None:
        """Puts the measurement before the first '(' on the label line."""
        result = QTestResult(
            name="Suite",
            function_name="testFoo",
            kind=ResultKind.BENCHMARK,
            description=BENCH_DESCRIPTION,
        )

        assert result.output_string(False) == (
            "Suite::testFoo: 0.5 msecs per iteration "
        )

    def test_benchmark_selected(self) -> None:
        """Puts the parenthesized totals on a second line when selected."""
        result = QTestResult(
            name="Suite",
            function_name="testFoo",
            data_tag="small",
            kind=ResultKind.BENCHMARK,
            description=BENCH_DESCRIPTION,
        )

        assert result.output_string(True) == (
            "Suite::testFoo (small): 0.5 msecs per iteration \n"
            "(total: 50, iterations: 100)"
        )

    def test_benchmark_without_parenthesis(self) -> None:
        """Splits at index 0 when the description has no '('."""
        result = QTestResult(
            name="Suite",
            function_name="testFoo",
            kind=ResultKind.BENCHMARK,
            description="12 ticks",
        )

        assert result.output_string(False) == "Suite::testFoo: "
        assert result.output_string(True) == "Suite::testFoo: \n12 ticks"

    @pytest.mark.parametrize("selected", [True, False])
    def test_benchmark_empty_description(self, selected: bool) -> None:
        """Renders only the label for an empty benchmark description."""
        result = QTestResult(
            name="Suite", function_name="testFoo", kind=ResultKind.BENCHMARK
        )

        assert result.output_string(selected) == "Suite::testFoo"

    @pytest.mark.parametrize(
        "kind",
        [
            ResultKind.SKIP,
            ResultKind.MESSAGE_DEBUG,
            ResultKind.MESSAGE_WARN,
            ResultKind.MESSAGE_FATAL,
            ResultKind.INVALID,
        ],
    )
    def test_other_kinds_render_description(self, kind: ResultKind) -> None:
        """Falls back to the description for message kinds."""
        result = QTestResultFactory.build(kind=kind, description=MULTI_LINE)

        assert result.output_string(False) == "line1"
        assert result.output_string(True) == MULTI_LINE

    def test_output_is_idempotent(self) -> None:
        """Renders byte-identical output on repeated calls."""
        result = QTestResultFactory.build(
            kind=ResultKind.BENCHMARK, description=BENCH_DESCRIPTION
        )

        assert result.output_string(True) == result.output_string(True)
        assert result.output_string(False) == result.output_string(False)


class TestGTestResult:
    """Tests for GTestResult.output_string."""

    def test_fail_unselected_shows_test_set_name(self) -> None:
        """Shows only the test set name when not selected."""
        result = GTestResult(
            name="SuiteA",
            test_set_name="SuiteA.CaseB",
            kind=ResultKind.FAIL,
            description="expected true, got false",
        )

        assert result.output_string(False) == "SuiteA.CaseB"

    def test_pass_selected_appends_description(self) -> None:
        """Appends the full description when selected."""
        result = GTestResult(
            test_set_name="SuiteA.CaseB",
            kind=ResultKind.PASS,
            description="took 3 ms\nall good",
        )

        assert result.output_string(True) == "SuiteA.CaseB\ntook 3 ms\nall good"

    def test_pass_selected_empty_description(self) -> None:
        """Shows only the test set name when there is no description."""
        result = GTestResultFactory.build(
            test_set_name="SuiteA.CaseB", kind=ResultKind.PASS, description=""
        )

        assert result.output_string(True) == "SuiteA.CaseB"

    @pytest.mark.parametrize(
        "kind",
        [ResultKind.SKIP, ResultKind.MESSAGE_WARN, ResultKind.EXPECTED_FAIL],
    )
    def test_other_kinds_render_description(self, kind: ResultKind) -> None:
        """Ignores the test set name for kinds other than pass and fail."""
        result = GTestResultFactory.build(
            test_set_name="SuiteA.CaseB", kind=kind, description=MULTI_LINE
        )

        assert result.output_string(False) == "line1"
        assert result.output_string(True) == MULTI_LINE


@pytest.mark.parametrize(
    "result",
    [
        TestResult(kind=ResultKind.MESSAGE_WARN, description=MULTI_LINE),
        FaultyResult(kind=ResultKind.INVALID, description=MULTI_LINE),
        QTestResult(kind=ResultKind.PASS, description=MULTI_LINE),
        GTestResult(kind=ResultKind.FAIL, description=MULTI_LINE),
    ],
)
def test_first_line_on_every_variant(
    result: TestResult | FaultyResult | QTestResult | GTestResult,
) -> None:
    """Exposes the first description line on every result type."""
    assert result.first_line == "line1"
    assert result.description == MULTI_LINE
