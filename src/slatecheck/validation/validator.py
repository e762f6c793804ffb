"""Depth-first validator for slate documents.

Visits nodes pre-order, left to right, and stops at the first violation.
The input is never mutated and no state survives a call.
"""

import logging
from typing import Any, Sequence

from ..config import SlatecheckConfig, ValidatorConfig, create_default_config
from ..constants import (
    NON_EMPTY_ELEMENTS,
    PATH_SEPARATOR,
    ROOT_LABEL,
    SLATE_DATA,
    TEXT_NODE_TYPE,
    VALID_MARKS,
)
from .framework import VALID, ErrorKind, Invalid, NodeKind, ValidationResult
from .rules import RULES

logger = logging.getLogger(__name__)


def classify(node: Any) -> NodeKind:
    """Determine which capability a node satisfies."""
    if not isinstance(node, dict):
        return NodeKind.UNSUPPORTED
    if "text" in node:
        return NodeKind.TEXT
    node_type = node.get("type")
    if isinstance(node.get("children"), list) and isinstance(node_type, str) and node_type in RULES:
        return NodeKind.ELEMENT
    return NodeKind.UNSUPPORTED


class DocumentValidator:
    """Validates documents against the fixed element schema."""

    def __init__(self, config: SlatecheckConfig | None = None):
        if config is None:
            config = create_default_config()
        self.config: ValidatorConfig = config.validator

    def validate(self, document: Sequence[Any]) -> ValidationResult:
        """Validate a document.

        Args:
            document: Ordered sequence of top-level nodes

        Returns:
            Valid, or Invalid describing the first violation
        """
        if not isinstance(document, (list, tuple)) or len(document) == 0:
            logger.debug("Rejecting empty or non-sequence document")
            return Invalid(
                kind=ErrorKind.EMPTY_CONTENT,
                error="Slate object should be a non-empty array.",
                error_key=f"{SLATE_DATA}_{ErrorKind.EMPTY_CONTENT.value}",
                user_friendly_message="The content seems to be empty. Please add some content and try again.",
                node_type=None,
                path=[],
            )

        logger.debug(f"Validating document with {len(document)} top-level nodes")

        for i, node in enumerate(document):
            result = self._validate_node(node, [f"{ROOT_LABEL}[{i}]"], depth=1)
            if not result.is_valid:
                logger.debug(f"Validation failed: {result}")
                return result

        return VALID

    def _validate_node(self, node: Any, path: list[str], depth: int) -> ValidationResult:
        if depth > self.config.max_depth:
            return self._depth_exceeded(node, path)

        kind = classify(node)
        if kind == NodeKind.TEXT:
            return self._validate_text(node, path)
        if kind == NodeKind.ELEMENT:
            return self._validate_element(node, path, depth)
        return self._unsupported(node, path)

    def _validate_text(self, node: dict, path: list[str]) -> ValidationResult:
        location = PATH_SEPARATOR.join(path)

        if not isinstance(node["text"], str):
            return Invalid(
                kind=ErrorKind.INVALID_CONTENT,
                error=f"Text node at path {location} has an invalid 'text' property.",
                error_key=f"{TEXT_NODE_TYPE}_{ErrorKind.INVALID_CONTENT.value}",
                user_friendly_message="There is an issue with the text content. Please review the text and try again.",
                node_type=TEXT_NODE_TYPE,
                path=path,
            )

        for mark in node:
            if mark != "text" and mark not in VALID_MARKS:
                return Invalid(
                    kind=ErrorKind.INVALID_CONTENT,
                    error=f"Text node at path {location} has an invalid mark '{mark}'.",
                    error_key=f"{TEXT_NODE_TYPE}_{mark}_{ErrorKind.INVALID_CONTENT.value}",
                    user_friendly_message=f"There is an unsupported text style: '{mark}'. Please remove or correct it.",
                    node_type=TEXT_NODE_TYPE,
                    path=path,
                )

        return VALID

    def _validate_element(self, node: dict, path: list[str], depth: int) -> ValidationResult:
        node_type = node["type"]
        children = node["children"]

        if node_type in NON_EMPTY_ELEMENTS and len(children) == 0:
            readable = node_type.replace("_", " ", 1)
            return Invalid(
                kind=ErrorKind.EMPTY_CONTENT,
                error=f"{node_type} at path {PATH_SEPARATOR.join(path)} should not be empty.",
                error_key=f"{node_type}_{ErrorKind.EMPTY_CONTENT.value}",
                user_friendly_message=f"The {readable} should contain content. Please add content inside the {readable}.",
                node_type=node_type,
                path=path,
            )

        rule = RULES[node_type]

        violation = rule.check_attributes(node, path, self.config)
        if violation is not None:
            return violation

        if not rule.recurses(self.config):
            return VALID

        for i, child in enumerate(children):
            violation = rule.check_child(node, i, child, path)
            if violation is not None:
                return violation

            result = self._validate_node(child, [*path, f"{node_type}[{i}]"], depth + 1)
            if not result.is_valid:
                return result

        return VALID

    def _unsupported(self, node: Any, path: list[str]) -> Invalid:
        declared = node.get("type") if isinstance(node, dict) else None
        return Invalid(
            kind=ErrorKind.UNSUPPORTED_NODE,
            error=f"Invalid node type at path {PATH_SEPARATOR.join(path)}.",
            error_key=f"{ErrorKind.UNSUPPORTED_NODE.value}_{declared}",
            user_friendly_message="There is an issue with the content structure. Please review the content and try again.",
            node_type=None,
            path=path,
        )

    def _depth_exceeded(self, node: Any, path: list[str]) -> Invalid:
        declared = node.get("type") if isinstance(node, dict) else None
        if declared is None and isinstance(node, dict) and "text" in node:
            declared = TEXT_NODE_TYPE
        return Invalid(
            kind=ErrorKind.DEPTH_EXCEEDED,
            error=(
                f"Node at path {PATH_SEPARATOR.join(path)} exceeds the maximum "
                f"nesting depth of {self.config.max_depth}."
            ),
            error_key=f"{SLATE_DATA}_{ErrorKind.DEPTH_EXCEEDED.value}",
            user_friendly_message="The content is nested too deeply. Please simplify its structure and try again.",
            node_type=declared if isinstance(declared, str) else None,
            path=path,
        )


def validate_document(document: Sequence[Any], config: SlatecheckConfig | None = None) -> ValidationResult:
    """Validate a document with the given (or default) configuration."""
    return DocumentValidator(config).validate(document)


validate = validate_document
