"""Models for structured result records handed over by output readers."""

from typing import Annotated, Literal

from pydantic import ConfigDict, Field, TypeAdapter

from autotest_results.kinds import ResultKind, kind_from_int, kind_from_token
from autotest_results.models.base import Model
from autotest_results.models.result import GTestResult, QTestResult, TestResult


class RecordBase(Model):
    """Fields shared by the records of every framework."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(default="", description="Test suite or class name")
    result: str | int = Field(
        ..., description="Result token (e.g. 'xfail') or raw result kind value"
    )
    description: str = Field(default="", description="Free text, may be multi-line")

    @property
    def kind(self) -> ResultKind:
        """Result kind decoded from the token or integer."""
        if isinstance(self.result, int):
            return kind_from_int(self.result)
        return kind_from_token(self.result)


class GenericRecord(RecordBase):
    """Record not tied to a framework."""

    framework: Literal["generic"]

    def to_result(self) -> TestResult:
        """Build the result value for this record."""
        return TestResult(
            name=self.name, kind=self.kind, description=self.description
        )


class QTestRecord(RecordBase):
    """Record produced from QtTest output."""

    framework: Literal["qtest"]
    function_name: str = Field(default="", description="Test function name")
    data_tag: str = Field(default="", description="Data row of a data-driven test")

    def to_result(self) -> QTestResult:
        """Build the result value for this record."""
        return QTestResult(
            name=self.name,
            kind=self.kind,
            description=self.description,
            function_name=self.function_name,
            data_tag=self.data_tag,
        )


class GTestRecord(RecordBase):
    """Record produced from Google Test output."""

    framework: Literal["gtest"]
    test_set_name: str = Field(default="", description="Suite.Case identifier")

    def to_result(self) -> GTestResult:
        """Build the result value for this record."""
        return GTestResult(
            name=self.name,
            kind=self.kind,
            description=self.description,
            test_set_name=self.test_set_name,
        )


ResultRecord = Annotated[
    GenericRecord | QTestRecord | GTestRecord, Field(discriminator="framework")
]

RESULT_RECORD_ADAPTER: TypeAdapter[GenericRecord | QTestRecord | GTestRecord] = (
    TypeAdapter(ResultRecord)
)
