"""Per-framework test result values and their text rendering."""

from dataclasses import dataclass
from typing import Protocol

from autotest_results.kinds import ResultKind


class Renderable(Protocol):
    """Anything that can be shown as a line in the results output."""

    @property
    def name(self) -> str: ...

    @property
    def kind(self) -> ResultKind: ...

    @property
    def description(self) -> str: ...

    @property
    def first_line(self) -> str: ...

    def output_string(self, selected: bool) -> str:
        """Return the text to display, full detail when selected."""
        ...


def first_line_of(text: str) -> str:
    """Return everything before the first newline of text."""
    return text.split("\n", 1)[0]


def default_output(description: str, selected: bool) -> str:
    """Render a description: all of it when selected, else the first line."""
    return description if selected else first_line_of(description)


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Result that is not tied to a specific test framework.

    ``name`` usually identifies the originating test suite or class.
    """

    __test__ = False

    name: str = ""
    kind: ResultKind = ResultKind.INVALID
    description: str = ""

    @property
    def first_line(self) -> str:
        """First line of the description."""
        return first_line_of(self.description)

    def output_string(self, selected: bool) -> str:
        """Return the full description when selected, else its first line."""
        return default_output(self.description, selected)


@dataclass(frozen=True, kw_only=True)
class FaultyResult:
    """Stand-in for input that could not be understood.

    Carries enough to still show the user something about the bad input.
    """

    kind: ResultKind
    description: str
    name: str = ""

    @property
    def first_line(self) -> str:
        """First line of the description."""
        return first_line_of(self.description)

    def output_string(self, selected: bool) -> str:
        """Return the full description when selected, else its first line."""
        return default_output(self.description, selected)


@dataclass(frozen=True, kw_only=True)
class QTestResult:
    """Result reported by an xUnit-style framework (QtTest).

    ``name`` is the test class, ``function_name`` the test function and
    ``data_tag`` the optional row of a data-driven test.
    """

    __test__ = False

    name: str = ""
    kind: ResultKind = ResultKind.INVALID
    description: str = ""
    function_name: str = ""
    data_tag: str = ""

    @property
    def first_line(self) -> str:
        """First line of the description."""
        return first_line_of(self.description)

    def _label(self) -> str:
        label = f"{self.name}::{self.function_name}"
        if self.data_tag:
            label += f" ({self.data_tag})"
        return label

    def output_string(self, selected: bool) -> str:
        """Render as ``Class::function (tag)`` followed by kind-specific detail.

        Benchmark descriptions are split at the first ``(``: the measurement
        goes on the label line, the parenthesized totals below it when
        selected. A description without ``(`` is treated as split at index 0.
        """
        desc = self.description
        match self.kind:
            case (
                ResultKind.PASS
                | ResultKind.FAIL
                | ResultKind.EXPECTED_FAIL
                | ResultKind.UNEXPECTED_PASS
                | ResultKind.BLACKLISTED_FAIL
                | ResultKind.BLACKLISTED_PASS
            ):
                output = self._label()
                if selected and desc:
                    output += "\n" + desc
                return output
            case ResultKind.BENCHMARK:
                output = self._label()
                if desc:
                    split_at = max(desc.find("("), 0)
                    output += ": " + desc[:split_at]
                    if selected:
                        output += "\n" + desc[split_at:]
                return output
            case _:
                return default_output(desc, selected)


@dataclass(frozen=True, kw_only=True)
class GTestResult:
    """Result reported by an assertion-style framework (Google Test).

    Pass and fail results are identified by ``test_set_name``, usually
    ``Suite.Case``.
    """

    __test__ = False

    name: str = ""
    kind: ResultKind = ResultKind.INVALID
    description: str = ""
    test_set_name: str = ""

    @property
    def first_line(self) -> str:
        """First line of the description."""
        return first_line_of(self.description)

    def output_string(self, selected: bool) -> str:
        """Render pass/fail results by test set name, others by description."""
        match self.kind:
            case ResultKind.PASS | ResultKind.FAIL:
                output = self.test_set_name
                if selected and self.description:
                    output += "\n" + self.description
                return output
            case _:
                return default_output(self.description, selected)


type AnyTestResult = TestResult | FaultyResult | QTestResult | GTestResult
