"""slatecheck - Structural validator for slate rich-text documents.

slatecheck checks a document tree of text leaves and typed elements against a
fixed schema and reports the first violation with a stable error key, a
user-facing message and the path to the offending node.
"""

__version__ = "0.1.0"
__author__ = "slatecheck contributors"
__description__ = "Structural validator for slate rich-text documents"

from slatecheck.config import SlatecheckConfig
from slatecheck.validation import Invalid, Valid, ValidationResult, validate, validate_document

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "SlatecheckConfig",
    "Invalid",
    "Valid",
    "ValidationResult",
    "validate",
    "validate_document",
]
