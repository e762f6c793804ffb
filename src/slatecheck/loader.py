"""Reading serialized slate documents from disk."""

import json
import logging
from pathlib import Path
from typing import Any

from slatecheck.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


def load_document(path: Path) -> Any:
    """Load a JSON document as-is; shape checks are left to the validator.

    Raises:
        DocumentLoadError: If the file is missing or not valid JSON
    """
    if not path.exists():
        raise DocumentLoadError(f"Document not found: {path}", source=str(path))

    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"Invalid JSON in {path}: {e}", source=str(path)) from e
    except OSError as e:
        raise DocumentLoadError(f"Failed to read {path}: {e}", source=str(path)) from e

    logger.debug(f"Loaded document from {path}")
    return document
