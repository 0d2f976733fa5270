"""Checker configuration loaded from YAML."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from jstatlib.core.variant import PARALLEL_TENURED_COLLECTORS
from jstatlib.registry import load_schema, validate_document


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded or is invalid."""


@dataclass(frozen=True)
class CheckerConfig:
    """Options for the capacity checker.

    Example YAML::

        parallel_tenured_collectors: ["PS MarkSweep"]
        fail_fast: false
    """

    parallel_tenured_collectors: frozenset[str] = PARALLEL_TENURED_COLLECTORS
    fail_fast: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None, source: str = "<config>") -> CheckerConfig:
        """Validate *data* against the bundled schema and build a config."""
        if data is None:
            return cls()
        errors = validate_document(data, load_schema("config.schema.json"), source)
        if errors:
            raise ConfigError("\n".join(errors))
        kwargs: dict[str, Any] = {}
        if "parallel_tenured_collectors" in data:
            kwargs["parallel_tenured_collectors"] = frozenset(data["parallel_tenured_collectors"])
        if "fail_fast" in data:
            kwargs["fail_fast"] = data["fail_fast"]
        return cls(**kwargs)


def load_config(path: str | Path) -> CheckerConfig:
    """Load a CheckerConfig from a YAML file. An empty file gives the defaults."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"File not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    return CheckerConfig.from_mapping(data, str(path))
