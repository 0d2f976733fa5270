"""Checks subpackage (Layer 2 -- depends on core, report, diagnostics)."""

from jstatlib.checks.capacity import (
    CHECKS,
    TOLERANCE,
    CapacityChecker,
    assert_consistency,
    check_consistency,
    float_is_sum,
)
from jstatlib.checks.results import (
    CheckError,
    CheckResult,
    ConsistencyError,
    ExitCodeError,
    FieldMissing,
    InvariantViolation,
    Relation,
)

__all__ = [
    "CHECKS",
    "TOLERANCE",
    "CapacityChecker",
    "CheckError",
    "CheckResult",
    "ConsistencyError",
    "ExitCodeError",
    "FieldMissing",
    "InvariantViolation",
    "Relation",
    "assert_consistency",
    "check_consistency",
    "float_is_sum",
]
