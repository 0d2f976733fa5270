"""Core subpackage (Layer 1 -- depends on diagnostics and registry)."""

from jstatlib.core.config import CheckerConfig, ConfigError, load_config
from jstatlib.core.variant import (
    PARALLEL_TENURED_COLLECTORS,
    ClassifierUnavailable,
    CollectorVariant,
    StaticStrategyRegistry,
    StrategyClassifier,
    StrategyRegistry,
    VariantProvider,
)

__all__ = [
    "PARALLEL_TENURED_COLLECTORS",
    "CheckerConfig",
    "ClassifierUnavailable",
    "CollectorVariant",
    "ConfigError",
    "StaticStrategyRegistry",
    "StrategyClassifier",
    "StrategyRegistry",
    "VariantProvider",
    "load_config",
]
