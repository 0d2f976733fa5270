"""Consistency checks for ``jstat -gccapacity`` reports."""

from jstatlib.checks import (
    TOLERANCE,
    CapacityChecker,
    CheckResult,
    ConsistencyError,
    ExitCodeError,
    FieldMissing,
    InvariantViolation,
    Relation,
    assert_consistency,
    check_consistency,
)
from jstatlib.core import (
    CheckerConfig,
    CollectorVariant,
    StaticStrategyRegistry,
    StrategyClassifier,
    load_config,
)
from jstatlib.report import (
    CapacityReport,
    FieldMissingError,
    ToolResults,
    parse_table,
)

__version__ = "0.1.0"

__all__ = [
    "TOLERANCE",
    "CapacityChecker",
    "CapacityReport",
    "CheckResult",
    "CheckerConfig",
    "CollectorVariant",
    "ConsistencyError",
    "ExitCodeError",
    "FieldMissing",
    "FieldMissingError",
    "InvariantViolation",
    "Relation",
    "StaticStrategyRegistry",
    "StrategyClassifier",
    "ToolResults",
    "assert_consistency",
    "check_consistency",
    "load_config",
    "parse_table",
]
