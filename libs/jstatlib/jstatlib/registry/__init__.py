"""Column registry for ``jstat -gccapacity`` output.

The registry ships as package data (``columns.yaml``) and is validated
against ``columns.schema.json`` when loaded.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Any

import jsonschema
import yaml


class RegistryError(Exception):
    """Raised when a bundled registry or schema file is malformed."""


@dataclass(frozen=True)
class ColumnSpec:
    """Description of one report column."""

    name: str
    area: str
    kind: str
    description: str
    unit: str | None = None

    @property
    def is_counter(self) -> bool:
        return self.kind == "counter"

    def __str__(self) -> str:
        unit = f" ({self.unit})" if self.unit else ""
        return f"{self.name}: {self.description}{unit}"


def read_text(name: str) -> str:
    """Return the text of a data file bundled in this package."""
    return resources.files(__package__).joinpath(name).read_text(encoding="utf-8")


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema."""
    try:
        return json.loads(read_text(name))
    except json.JSONDecodeError as e:
        raise RegistryError(f"Invalid JSON in {name}: {e}") from e


def validate_document(data: Any, schema: dict[str, Any], source: str) -> list[str]:
    """Validate *data* against *schema*. Returns a list of error strings."""
    errors = []
    validator = jsonschema.Draft7Validator(schema)
    for e in sorted(validator.iter_errors(data), key=lambda err: [str(p) for p in err.path]):
        where = " -> ".join(str(p) for p in e.path)
        errors.append(f"{source}: {e.message}" + (f" (at {where})" if where else ""))
    return errors


@lru_cache(maxsize=None)
def load_columns() -> dict[str, ColumnSpec]:
    """Load the column registry, keyed by column name in report order."""
    try:
        data = yaml.safe_load(read_text("columns.yaml"))
    except yaml.YAMLError as e:
        raise RegistryError(f"Invalid YAML in columns.yaml: {e}") from e

    errors = validate_document(data, load_schema("columns.schema.json"), "columns.yaml")
    if errors:
        raise RegistryError("\n".join(errors))

    return {
        name: ColumnSpec(
            name=name,
            area=spec["area"],
            kind=spec["kind"],
            description=spec["description"],
            unit=spec.get("unit"),
        )
        for name, spec in data["columns"].items()
    }


def column_names() -> tuple[str, ...]:
    """Column names in the order the tool prints them."""
    return tuple(load_columns())


__all__ = [
    "ColumnSpec",
    "RegistryError",
    "column_names",
    "load_columns",
    "load_schema",
    "read_text",
    "validate_document",
]
