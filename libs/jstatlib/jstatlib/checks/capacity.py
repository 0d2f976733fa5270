"""Consistency checks for ``jstat -gccapacity`` reports.

Checks run in this order, each one reading the fields it needs as it goes:

1. exit status is 0 (otherwise nothing else is checked)
2. young generation bounds: ``NGCMN <= NGC <= NGCMX``
3. young sub-pools fit: ``S0C``, ``S1C``, ``EC`` each ``<= NGC``
4. young sum: ``NGC == S0C + S1C + EC`` within TOLERANCE, or only
   ``NGC >= S0C + S1C + EC`` when the tenured collector is parallel
5. old generation bounds: ``OGCMN <= OGC <= OGCMX``
6. ``OC == OGC`` exactly (old space is made up of one old generation)
7. metaspace bounds: ``MCMN <= MC <= MCMX``
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from jstatlib.checks.results import (
    CheckError,
    CheckResult,
    ExitCodeError,
    FieldMissing,
    InvariantViolation,
    Relation,
)
from jstatlib.core.config import CheckerConfig
from jstatlib.core.variant import (
    CollectorVariant,
    StrategyClassifier,
    StrategyRegistry,
    VariantProvider,
)
from jstatlib.diagnostics.collector import DiagnosticCollector
from jstatlib.registry import load_columns
from jstatlib.report.capacity import CapacityReport
from jstatlib.report.errors import FieldMissingError

logger = logging.getLogger(__name__)

TOLERANCE = 0.0011

Check = Callable[[CapacityReport, CollectorVariant], Iterator[InvariantViolation]]


def float_is_sum(total: float, *parts: float, tolerance: float = TOLERANCE) -> bool:
    """Return True if *total* equals the sum of *parts* within *tolerance*."""
    for part in parts:
        total -= part
    return abs(total) <= tolerance


def _bounds(
    report: CapacityReport,
    relation: Relation,
    area: str,
    current: str,
    minimum: str,
    maximum: str,
) -> Iterator[InvariantViolation]:
    mn = report.float_value(minimum)
    mx = report.float_value(maximum)
    if not mx >= mn:
        yield InvariantViolation(
            relation,
            f"{maximum} >= {minimum}",
            f"{minimum} > {maximum}",
            f"min {area} capacity > max {area} capacity",
            ((minimum, mn), (maximum, mx)),
        )

    cur = report.float_value(current)
    if not cur >= mn:
        yield InvariantViolation(
            relation,
            f"{current} >= {minimum}",
            f"{current} < {minimum}",
            f"{area} capacity < min {area} capacity",
            ((current, cur), (minimum, mn)),
        )
    if not cur <= mx:
        yield InvariantViolation(
            relation,
            f"{current} <= {maximum}",
            f"{current} > {maximum}",
            f"{area} capacity > max {area} capacity",
            ((current, cur), (maximum, mx)),
        )


def check_young_bounds(report: CapacityReport, variant: CollectorVariant) -> Iterator[InvariantViolation]:
    yield from _bounds(report, Relation.YOUNG_BOUNDS, "new generation", "NGC", "NGCMN", "NGCMX")


_YOUNG_SPACES = (
    ("S0C", "survivor space 0"),
    ("S1C", "survivor space 1"),
    ("EC", "eden space"),
)


def check_young_containment(
    report: CapacityReport, variant: CollectorVariant
) -> Iterator[InvariantViolation]:
    ngc = report.float_value("NGC")
    for name, space in _YOUNG_SPACES:
        value = report.float_value(name)
        if not value <= ngc:
            yield InvariantViolation(
                Relation.YOUNG_CONTAINMENT,
                f"{name} <= NGC",
                f"{name} > NGC",
                f"{space} capacity > new generation capacity",
                ((name, value), ("NGC", ngc)),
            )


def check_young_sum(report: CapacityReport, variant: CollectorVariant) -> Iterator[InvariantViolation]:
    """NGC against S0C + S1C + EC; an upper bound for parallel collectors, equality otherwise."""
    ngc = report.float_value("NGC")
    s0c = report.float_value("S0C")
    s1c = report.float_value("S1C")
    ec = report.float_value("EC")
    total = s0c + s1c + ec
    operands = (("NGC", ngc), ("S0C", s0c), ("S1C", s1c), ("EC", ec), ("S0C + S1C + EC", total))

    if variant is CollectorVariant.PARALLEL:
        if not ngc >= total:
            yield InvariantViolation(
                Relation.YOUNG_SUM,
                "NGC >= S0C + S1C + EC",
                "NGC < (S0C + S1C + EC)",
                "new generation capacity < sum of its spaces",
                operands,
            )
    elif not float_is_sum(ngc, s0c, s1c, ec):
        yield InvariantViolation(
            Relation.YOUNG_SUM,
            "NGC == S0C + S1C + EC",
            "NGC != (S0C + S1C + EC)",
            f"new generation capacity != sum of its spaces, tolerance {TOLERANCE}",
            operands,
        )


def check_old_bounds(report: CapacityReport, variant: CollectorVariant) -> Iterator[InvariantViolation]:
    yield from _bounds(report, Relation.OLD_BOUNDS, "old generation", "OGC", "OGCMN", "OGCMX")


def check_old_identity(report: CapacityReport, variant: CollectorVariant) -> Iterator[InvariantViolation]:
    ogc = report.float_value("OGC")
    oc = report.float_value("OC")
    # Both come from the same counter, so no tolerance.
    if not oc == ogc:
        yield InvariantViolation(
            Relation.OLD_IDENTITY,
            "OC == OGC",
            "OC != OGC",
            "old generation capacity != old space capacity, old space is made up "
            "only from one old generation",
            (("OC", oc), ("OGC", ogc)),
        )


def check_metaspace_bounds(
    report: CapacityReport, variant: CollectorVariant
) -> Iterator[InvariantViolation]:
    yield from _bounds(report, Relation.METASPACE_BOUNDS, "metaspace", "MC", "MCMN", "MCMX")


CHECKS: tuple[Check, ...] = (
    check_young_bounds,
    check_young_containment,
    check_young_sum,
    check_old_bounds,
    check_old_identity,
    check_metaspace_bounds,
)


class CapacityChecker:
    """Check capacity reports against the relations that always hold between pools.

    The checker holds no per-report state: *variant* is either a fixed
    CollectorVariant or a provider (such as a StrategyClassifier) that is
    called once for every report checked.
    """

    def __init__(
        self,
        variant: CollectorVariant | VariantProvider,
        config: CheckerConfig | None = None,
    ) -> None:
        self._variant = variant
        self._config = config or CheckerConfig()

    @classmethod
    def for_registry(
        cls, registry: StrategyRegistry, config: CheckerConfig | None = None
    ) -> CapacityChecker:
        """Build a checker that classifies the collector from *registry*."""
        config = config or CheckerConfig()
        return cls(StrategyClassifier(registry, config.parallel_tenured_collectors), config)

    @property
    def config(self) -> CheckerConfig:
        return self._config

    def _resolve_variant(self) -> CollectorVariant:
        if isinstance(self._variant, CollectorVariant):
            return self._variant
        return self._variant()

    def check(self, report: CapacityReport) -> CheckResult:
        """Check *report* and return every error found, in check order."""
        diag = DiagnosticCollector()
        errors: list[CheckError] = []

        if report.exit_status != 0:
            error = ExitCodeError(report.exit_status)
            diag.error(error.message, code=str(Relation.EXIT_STATUS))
            return CheckResult(None, (error,), tuple(diag.get_all()))

        variant = self._resolve_variant()
        logger.debug("Checking capacity report with %s tenured collector variant", variant)
        diag.info(f"Tenured collector variant: {variant}", code="variant")

        try:
            for check in CHECKS:
                for violation in check(report, variant):
                    logger.debug("Violation: %s", violation.message)
                    errors.append(violation)
                    diag.error(
                        violation.message,
                        code=violation.expression,
                        notes=(f"relation: {violation.relation}",),
                    )
                    if self._config.fail_fast:
                        return CheckResult(variant, tuple(errors), tuple(diag.get_all()))
        except FieldMissingError as e:
            missing = FieldMissing(e.name, e.reason)
            errors.append(missing)
            column = load_columns().get(e.name)
            diag.error(
                missing.message,
                code="field-missing",
                notes=(str(column),) if column else (),
            )

        return CheckResult(variant, tuple(errors), tuple(diag.get_all()))

    __call__ = check


def check_consistency(
    report: CapacityReport,
    variant: CollectorVariant | VariantProvider,
    *,
    fail_fast: bool = False,
) -> CheckResult:
    """Check one report; see CapacityChecker.check."""
    return CapacityChecker(variant, CheckerConfig(fail_fast=fail_fast)).check(report)


def assert_consistency(
    report: CapacityReport,
    variant: CollectorVariant | VariantProvider,
    *,
    fail_fast: bool = False,
) -> CheckResult:
    """Check one report and raise ConsistencyError carrying the first error's message on failure."""
    result = check_consistency(report, variant, fail_fast=fail_fast)
    result.raise_for_errors()
    return result
