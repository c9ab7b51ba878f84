"""Type model loader.

Reads a schema dump (JSON or YAML) into a Model.
"""

import logging
from pathlib import Path

import yaml

from .base import Model

logger = logging.getLogger(__name__)


def load_model(file_path: Path) -> Model:
    """Load a type model file into a Model."""
    text = file_path.read_text(encoding="utf-8")
    doc = yaml.safe_load(text)
    if not isinstance(doc, dict):
        raise ValueError(f"Expected a mapping at the top level of {file_path}")

    model = Model.model_validate(doc)
    logger.debug(
        "Loaded %d endpoints and %d types from %s",
        len(model.endpoints), len(model.types), file_path,
    )
    return model
