"""Conformance runner that goes through assert_consistency, like a test harness would."""

from jstatlib.checks import ConsistencyError, assert_consistency
from jstatlib.core import StaticStrategyRegistry, StrategyClassifier
from jstatlib.report import CapacityReport, FieldMissingError, TableParseError, ToolResults
from tests.conformance.runner import ValidationResult


class AssertRunner:
    """Stop at the first failure and report its message verbatim."""

    name = "assert"

    def validate(
        self,
        output: str,
        exit_code: int = 0,
        collectors: tuple[str, ...] = (),
    ) -> ValidationResult:
        classifier = StrategyClassifier(StaticStrategyRegistry(collectors))
        try:
            report = CapacityReport.from_tool_results(ToolResults(exit_code, output))
            assert_consistency(report, classifier, fail_fast=True)
        except (ConsistencyError, FieldMissingError, TableParseError) as e:
            return ValidationResult(valid=False, diagnostics=[str(e)])
        return ValidationResult(valid=True)
