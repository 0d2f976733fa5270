"""Result values produced by the capacity checker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from jstatlib.core.variant import CollectorVariant
from jstatlib.diagnostics.diagnostic import Diagnostic


class Relation(Enum):
    """Groups of relations checked on a capacity report, in check order."""

    EXIT_STATUS = "exit-status"
    YOUNG_BOUNDS = "young-bounds"
    YOUNG_CONTAINMENT = "young-containment"
    YOUNG_SUM = "young-sum"
    OLD_BOUNDS = "old-bounds"
    OLD_IDENTITY = "old-identity"
    METASPACE_BOUNDS = "metaspace-bounds"

    def __str__(self) -> str:
        return self.value


class CheckError(ABC):
    """Base type for everything that makes a report fail. Subclasses are frozen dataclasses."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description of the failure."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ExitCodeError(CheckError):
    """The tool exited non-zero, so none of its numbers were checked."""

    exit_status: int

    @property
    def message(self) -> str:
        return f"Unexpected exit code: {self.exit_status}"


@dataclass(frozen=True)
class FieldMissing(CheckError):
    """A field needed by a check is absent or not numeric."""

    name: str
    reason: str = "not present in report"

    @property
    def message(self) -> str:
        return f"Field {self.name}: {self.reason}"


def _format_value(value: float) -> str:
    return repr(float(value))


@dataclass(frozen=True)
class InvariantViolation(CheckError):
    """A relation between report fields does not hold.

    Attributes
    ----------
    relation:
        Group the relation belongs to.
    expression:
        The relation that must hold, e.g. ``"OC == OGC"``.
    failure:
        The relation that was observed instead, e.g. ``"OC != OGC"``.
    description:
        What the failed relation means in memory-pool terms.
    operands:
        ``(name, value)`` pairs for every value involved.
    """

    relation: Relation
    expression: str
    failure: str
    description: str
    operands: tuple[tuple[str, float], ...] = ()

    def operand(self, name: str) -> float:
        for key, value in self.operands:
            if key == name:
                return value
        raise KeyError(name)

    def format_operands(self) -> str:
        return ", ".join(f"{name}={_format_value(value)}" for name, value in self.operands)

    @property
    def message(self) -> str:
        return f"{self.failure} ({self.description}) ({self.format_operands()})"


class ConsistencyError(AssertionError):
    """Raised by assert_consistency; carries the full CheckResult."""

    def __init__(self, result: CheckResult) -> None:
        first = result.first_error
        super().__init__(first.message if first else "Capacity report is inconsistent")
        self.result = result


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one report.

    ``variant`` is None when the check stopped before the collector variant
    was needed (non-zero exit status).
    """

    variant: CollectorVariant | None
    errors: tuple[CheckError, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.ok

    @property
    def first_error(self) -> CheckError | None:
        return self.errors[0] if self.errors else None

    @property
    def violations(self) -> tuple[InvariantViolation, ...]:
        return tuple(e for e in self.errors if isinstance(e, InvariantViolation))

    def relations(self) -> list[Relation]:
        """Relation group of every violation, in the order found."""
        return [v.relation for v in self.violations]

    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def raise_for_errors(self) -> None:
        """Raise ConsistencyError if the report failed."""
        if self.errors:
            raise ConsistencyError(self)
