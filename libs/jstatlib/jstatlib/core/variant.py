"""Classify which collector currently manages the tenured generation.

The young-generation sum rule depends on it: with a parallel tenured
collector ``NGC`` only bounds ``S0C + S1C + EC`` from above, with any other
collector the two must be equal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum

logger = logging.getLogger(__name__)

# Currently the only parallel collector for the tenured generation.
PARALLEL_TENURED_COLLECTORS: frozenset[str] = frozenset({"PS MarkSweep"})

StrategyRegistry = Callable[[], Iterable[str]]
VariantProvider = Callable[[], "CollectorVariant"]


class CollectorVariant(Enum):
    """How young-generation sub-pool capacities relate to ``NGC``."""

    PARALLEL = "parallel"  # NGC >= S0C + S1C + EC
    EXACT = "exact"  # NGC == S0C + S1C + EC

    def __str__(self) -> str:
        return self.value


class ClassifierUnavailable(Exception):
    """Raised when the registry of active collectors cannot be queried."""


class StaticStrategyRegistry:
    """A registry that always reports the same collector names."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(names)

    def __call__(self) -> frozenset[str]:
        return self._names

    def __repr__(self) -> str:
        return f"StaticStrategyRegistry({sorted(self._names)!r})"


class StrategyClassifier:
    """Decide the collector variant from the names of the active collectors.

    Calling the classifier returns a CollectorVariant, so it can be handed to
    the capacity checker directly as its variant provider.
    """

    def __init__(
        self,
        registry: StrategyRegistry,
        parallel_names: Iterable[str] = PARALLEL_TENURED_COLLECTORS,
    ) -> None:
        self._registry = registry
        self._parallel_names = frozenset(parallel_names)

    @property
    def parallel_names(self) -> frozenset[str]:
        return self._parallel_names

    def active_strategies(self) -> frozenset[str]:
        """Query the registry.

        Raises:
            ClassifierUnavailable: if the registry call fails for any reason.
        """
        try:
            return frozenset(self._registry())
        except Exception as e:
            raise ClassifierUnavailable(f"Cannot list active collectors: {e}") from e

    def is_tenured_parallel(self) -> bool:
        """Return True if a parallel tenured collector is active.

        A failed registry query counts as "not parallel", which makes the
        checker enforce the exact young-generation sum.
        """
        # FIXME: decide whether a failed query should fail the check instead
        # of silently switching to the exact sum rule.
        try:
            active = self.active_strategies()
        except ClassifierUnavailable:
            logger.warning("Collector registry unavailable, assuming non-parallel", exc_info=True)
            return False
        return not active.isdisjoint(self._parallel_names)

    def classify(self) -> CollectorVariant:
        if self.is_tenured_parallel():
            return CollectorVariant.PARALLEL
        return CollectorVariant.EXACT

    def __call__(self) -> CollectorVariant:
        return self.classify()
