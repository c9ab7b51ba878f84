"""rest-api-spec directory loader.

The rest-api-spec ships one JSON file per endpoint, each holding a single
top-level key (the endpoint name). ``_common.json`` carries shared
documentation only and is skipped.
"""

import json
import logging
from pathlib import Path

from .base import JsonSpec

logger = logging.getLogger(__name__)


def load_json_spec(directory: Path) -> dict[str, JsonSpec]:
    """Load every endpoint spec in a rest-api-spec directory, keyed by endpoint name."""
    specs: dict[str, JsonSpec] = {}
    for file_path in sorted(directory.glob("*.json")):
        if file_path.name.startswith("_common"):
            continue
        data = json.loads(file_path.read_text(encoding="utf-8"))
        try:
            name, spec = parse_json_spec(data)
        except ValueError as e:
            raise ValueError(f"{file_path}: {e}") from e
        specs[name] = spec

    logger.debug("Loaded %d json specs from %s", len(specs), directory)
    return specs


def parse_json_spec(data: dict) -> tuple[str, JsonSpec]:
    """Parse the content of one spec file into (endpoint name, JsonSpec)."""
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError("expected exactly one endpoint per json spec file")
    name, body = next(iter(data.items()))
    return name, JsonSpec.model_validate(body)
