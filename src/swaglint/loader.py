"""
Loading of API-contract documents from disk.

JSON is the primary input format; `.yml` and `.yaml` files are decoded
with PyYAML. Any failure here is fatal and raised as DocumentLoadError,
before a single rule runs.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from swaglint.errors import DocumentLoadError
from swaglint.models import SwaggerDocument

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}
SUPPORTED_SWAGGER_VERSION = "2.0"


def parse_document(data: Any, source: str = "<document>") -> SwaggerDocument:
    """
    Validate decoded data into a SwaggerDocument.

    Args:
        data: Decoded JSON/YAML content
        source: Name used in error and log messages

    Returns:
        SwaggerDocument instance

    Raises:
        DocumentLoadError: If the data does not have the expected shape
    """
    if not isinstance(data, dict):
        raise DocumentLoadError(f"Decoding {source}: top level must be an object, got {type(data).__name__}")

    try:
        document = SwaggerDocument.model_validate(data)
    except ValidationError as e:
        raise DocumentLoadError(f"Decoding {source}: {e}") from e

    if document.swagger != SUPPORTED_SWAGGER_VERSION:
        logger.warning(
            f"{source} declares swagger version {document.swagger!r}, rules assume {SUPPORTED_SWAGGER_VERSION}"
        )

    logger.debug(f"Parsed {source}: {len(document.paths)} resources, {document.operation_count} operations")
    return document


def load_document(path: str | Path) -> SwaggerDocument:
    """
    Load an API-contract document from a JSON or YAML file.

    Args:
        path: Path to the document

    Returns:
        SwaggerDocument instance

    Raises:
        DocumentLoadError: If the file cannot be read or decoded
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Reading input: {e}") from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError(f"Decoding {path}: {e}") from e

    document = parse_document(data, source=str(path))
    logger.info(f"Loaded document {path}")
    return document


__all__ = [
    "load_document",
    "parse_document",
]
