"""Structural validation of slate document trees.

Validates a document against the fixed element schema and reports the first
violation found in depth-first, pre-order, left-to-right order.
"""

from .framework import ErrorKind, Invalid, NodeKind, Valid, ValidationResult
from .rules import RULES, ElementRule, create_default_rules
from .validator import DocumentValidator, classify, validate, validate_document

__all__ = [
    "DocumentValidator",
    "ElementRule",
    "ErrorKind",
    "Invalid",
    "NodeKind",
    "RULES",
    "Valid",
    "ValidationResult",
    "classify",
    "create_default_rules",
    "validate",
    "validate_document",
]
