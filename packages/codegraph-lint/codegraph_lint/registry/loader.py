"""Restriction Config Loader - YAML/JSON -> RestrictionEntry.

Accepted layouts:

1. Bare list:
   - object: foo
     property: bar
     message: Use baz instead.
   - property: __proto__

2. Mapping with a `restricted_properties` key:
   restricted_properties:
     - object: require
       property: ensure

JSON is a subset of YAML, so `.json` configs load through the same path.

This loader:
    1. Validates each entry against the RestrictionEntry schema
    2. Rejects duplicate entries (the configured set must be unique)
    3. Collects every error before failing
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from codegraph_lint.errors import ConfigLoadError, SchemaValidationError
from codegraph_lint.logging import get_logger
from codegraph_lint.types.entry import RestrictionEntry

logger = get_logger(__name__)

CONFIG_KEY = "restricted_properties"


def load_restrictions_yaml(path: str | Path) -> list[RestrictionEntry]:
    """Load restriction entries from a YAML or JSON file.

    Args:
        path: Path to config file

    Returns:
        Validated entries in file order

    Raises:
        ConfigLoadError: If file not found or invalid YAML
        SchemaValidationError: If any entry is invalid or duplicated

    Example:
        >>> entries = load_restrictions_yaml("restrictions.yaml")
        >>> entries[0].describe()
        'foo.bar'
    """
    path = Path(path)

    if not path.is_file():
        raise ConfigLoadError(f"Config file not found: {path}", path=str(path))

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}", path=str(path)) from e
    except OSError as e:
        raise ConfigLoadError(f"Failed to read file {path}: {e}", path=str(path)) from e

    entries = parse_restrictions(data, source=str(path))
    logger.info(f"Loaded {len(entries)} restrictions from {path}")
    return entries


def parse_restrictions(data: Any, source: str = "<inline>") -> list[RestrictionEntry]:
    """Validate raw config data into restriction entries.

    Args:
        data: Parsed YAML/JSON (list, mapping with `restricted_properties`, or None)
        source: Where the data came from (for error messages)

    Returns:
        Validated entries in input order (empty for None / empty list)

    Raises:
        ConfigLoadError: If the top-level structure is wrong
        SchemaValidationError: If any entry is invalid or duplicated
    """
    if data is None:
        return []

    if isinstance(data, dict):
        if CONFIG_KEY not in data:
            raise ConfigLoadError(f"Missing '{CONFIG_KEY}' key in {source}", source=source)
        data = data[CONFIG_KEY]
        if data is None:
            return []

    if not isinstance(data, list):
        raise ConfigLoadError(f"Expected list of restrictions in {source}, got {type(data).__name__}", source=source)

    entries: list[RestrictionEntry] = []
    seen: dict[RestrictionEntry, int] = {}
    errors: list[dict[str, Any]] = []

    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            errors.append({"source": source, "index": i, "error": f"Expected mapping, got {type(raw).__name__}"})
            continue

        try:
            entry = RestrictionEntry.model_validate(raw)
        except ValidationError as e:
            errors.append({"source": source, "index": i, "errors": e.errors(include_url=False)})
            continue

        if entry in seen:
            errors.append(
                {
                    "source": source,
                    "index": i,
                    "error": f"Duplicate restriction '{entry.describe()}' (first defined at index {seen[entry]})",
                }
            )
            continue

        seen[entry] = i
        entries.append(entry)

    if errors:
        error_msg = f"Failed to validate {len(errors)} restrictions from {source}"
        logger.error(f"{error_msg}: {errors}")
        raise SchemaValidationError(error_msg, errors, source=source)

    logger.debug(f"Validated {len(entries)} restrictions from {source}")
    return entries
