"""Result types for slate document validation.

A validation run yields either ``Valid`` or ``Invalid``; only the first
violation found is reported.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from ..constants import PATH_SEPARATOR


class ErrorKind(str, Enum):
    """Kinds of schema violations."""
    EMPTY_CONTENT = "empty_content"
    INVALID_CONTENT = "invalid_content"
    INVALID_STRUCTURE = "invalid_structure"
    UNSUPPORTED_NODE = "unsupported_node"
    DEPTH_EXCEEDED = "depth_exceeded"


class NodeKind(str, Enum):
    """Capability a visited node satisfies."""
    TEXT = "text"
    ELEMENT = "element"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Valid:
    """Successful validation."""

    @property
    def is_valid(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"isValid": True}


@dataclass(frozen=True)
class Invalid:
    """First schema violation found in a document."""
    kind: ErrorKind
    error: str
    error_key: str
    user_friendly_message: str
    node_type: str | None = None
    path: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def location(self) -> str:
        """Path rendered for humans, e.g. 'root[0] > ul[1]'."""
        return PATH_SEPARATOR.join(self.path)

    def __str__(self) -> str:
        return f"[{self.error_key}] {self.error}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "isValid": False,
            "error": self.error,
            "errorKey": self.error_key,
            "userFriendlyMessage": self.user_friendly_message,
            "nodeType": self.node_type,
            "path": list(self.path),
        }


ValidationResult = Union[Valid, Invalid]

VALID = Valid()
