"""Structural rules for slate element nodes.

Each rule governs one or more element types: which child types are permitted,
whether children are visited, and which attributes must be present.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any

from ..config import ValidatorConfig
from ..constants import PATH_SEPARATOR, ElementType
from .framework import ErrorKind, Invalid

logger = logging.getLogger(__name__)


def child_type_of(child: Any) -> str | None:
    """Declared type of a child node, None for leaves and non-nodes."""
    if isinstance(child, dict):
        child_type = child.get("type")
        return child_type if isinstance(child_type, str) else None
    return None


def is_numeric(value: Any) -> bool:
    """True for finite numbers and strings that parse as finite numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, str):
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


class ElementRule(ABC):
    """Base class for element rules."""

    # Permitted child types in the order they are reported; None means any
    allowed_children: tuple[str, ...] | None = None
    label: str = "Element"
    structure_message: str = "There is an issue with the content structure. Please review the content and try again."

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @property
    @abstractmethod
    def types(self) -> tuple[ElementType, ...]:
        """Element types governed by this rule."""
        pass

    def recurses(self, config: ValidatorConfig) -> bool:
        """Whether children are visited after this node's own checks."""
        return True

    def check_attributes(self, node: dict, path: list[str], config: ValidatorConfig) -> Invalid | None:
        """Check attributes carried by the element itself."""
        return None

    def label_for(self, node_type: str) -> str:
        """Name of the element used in developer-facing messages."""
        return self.label

    def check_child(self, node: dict, index: int, child: Any, path: list[str]) -> Invalid | None:
        """Check a child's type against the permitted set."""
        if self.allowed_children is None:
            return None

        child_type = child_type_of(child)
        if child_type in self.allowed_children:
            return None

        node_type = node["type"]
        expected = " or ".join(f"'{t}'" for t in self.allowed_children)
        return Invalid(
            kind=ErrorKind.INVALID_STRUCTURE,
            error=(
                f"{self.label_for(node_type)} at path {PATH_SEPARATOR.join(path)} has an invalid "
                f"child type '{child_type}' (expected {expected})."
            ),
            error_key=f"{node_type}_{ErrorKind.INVALID_STRUCTURE.value}",
            user_friendly_message=self.structure_message,
            node_type=node_type,
            path=[*path, f"{node_type}[{index}]"],
        )

    def describe(self, config: ValidatorConfig) -> dict[str, str]:
        """Summary used by the rules listing."""
        return {
            "types": ", ".join(t.value for t in self.types),
            "children": " | ".join(self.allowed_children) if self.allowed_children else "any",
            "recurses": "yes" if self.recurses(config) else "no",
        }


class BlockRule(ElementRule):
    """Text blocks, cells and lines: any children, all visited."""

    @property
    def name(self) -> str:
        return "block"

    @property
    def types(self) -> tuple[ElementType, ...]:
        return (
            ElementType.H1, ElementType.H2, ElementType.H3,
            ElementType.H4, ElementType.H5, ElementType.H6,
            ElementType.PARAGRAPH, ElementType.BLOCKQUOTE,
            ElementType.LIST_ITEM_CONTENT,
            ElementType.TABLE_HEADER, ElementType.TABLE_CELL,
            ElementType.CODE_LINE,
        )


class ListRule(ElementRule):
    """Bulleted and numbered lists hold list items only."""
    allowed_children = ("li",)
    structure_message = "There is an issue with the list structure. Please review and correct the list items."

    @property
    def name(self) -> str:
        return "list"

    @property
    def types(self) -> tuple[ElementType, ...]:
        return (ElementType.BULLETED_LIST, ElementType.NUMBERED_LIST)

    def label_for(self, node_type: str) -> str:
        return f"List ({node_type})"


class ListItemRule(ElementRule):
    """List items; children visited unless the legacy skip is configured."""

    @property
    def name(self) -> str:
        return "list_item"

    @property
    def types(self) -> tuple[ElementType, ...]:
        return (ElementType.LIST_ITEM,)

    def recurses(self, config: ValidatorConfig) -> bool:
        return config.recurse_list_items


class TableRule(ElementRule):
    """Tables hold rows only."""
    allowed_children = ("tr",)
    label = "Table"
    structure_message = "The table structure seems to have an issue. Please check the rows and columns."

    @property
    def name(self) -> str:
        return "table"

    @property
    def types(self) -> tuple[ElementType, ...]:
        return (ElementType.TABLE,)


class TableRowRule(ElementRule):
    """Rows hold header or data cells only."""
    allowed_children = ("th", "td")
    label = "Table row (tr)"
    structure_message = "There seems to be an issue with the table cells. Please ensure the cells are correct."

    @property
    def name(self) -> str:
        return "table_row"

    @property
    def types(self) -> tuple[ElementType, ...]:
        return (ElementType.TABLE_ROW,)


class CodeBlockRule(ElementRule):
    """Code blocks hold code lines only."""
    allowed_children = ("code_line",)
    label = "Code block (code_block)"
    structure_message = "There is an issue with the code block structure. Please ensure the code is properly formatted."

    @property
    def name(self) -> str:
        return "code_block"

    @property
    def types(self) -> tuple[ElementType, ...]:
        return (ElementType.CODE_BLOCK,)


class ImageRule(ElementRule):
    """Images need a url and numeric dimensions; children are not visited."""

    @property
    def name(self) -> str:
        return "image"

    @property
    def types(self) -> tuple[ElementType, ...]:
        return (ElementType.IMAGE,)

    def recurses(self, config: ValidatorConfig) -> bool:
        return False

    def check_attributes(self, node: dict, path: list[str], config: ValidatorConfig) -> Invalid | None:
        valid = isinstance(node.get("url"), str)
        if valid and config.strict_dimensions:
            valid = is_numeric(node.get("width")) and is_numeric(node.get("height"))

        if valid:
            return None

        return Invalid(
            kind=ErrorKind.INVALID_CONTENT,
            error=f"Image (img) at path {PATH_SEPARATOR.join(path)} has invalid 'url', 'width', or 'height' properties.",
            error_key=f"{node['type']}_{ErrorKind.INVALID_CONTENT.value}",
            user_friendly_message="There is an issue with the image properties. Please ensure the image URL and dimensions are correct.",
            node_type=node["type"],
            path=path,
        )


class LinkRule(ElementRule):
    """Links need a url before their children are visited."""

    @property
    def name(self) -> str:
        return "link"

    @property
    def types(self) -> tuple[ElementType, ...]:
        return (ElementType.LINK,)

    def check_attributes(self, node: dict, path: list[str], config: ValidatorConfig) -> Invalid | None:
        if isinstance(node.get("url"), str):
            return None

        return Invalid(
            kind=ErrorKind.INVALID_CONTENT,
            error=f"Link (a) at path {PATH_SEPARATOR.join(path)} has an invalid 'url' property.",
            error_key=f"{node['type']}_{ErrorKind.INVALID_CONTENT.value}",
            user_friendly_message="There is an issue with the link URL. Please ensure it is correct.",
            node_type=node["type"],
            path=path,
        )


def create_default_rules() -> list[ElementRule]:
    """Create the rule set covering every element type."""
    return [
        BlockRule(),
        ListRule(),
        ListItemRule(),
        TableRule(),
        TableRowRule(),
        CodeBlockRule(),
        ImageRule(),
        LinkRule(),
    ]


def build_rule_table(rules: list[ElementRule]) -> dict[str, ElementRule]:
    """Map each element type to its rule.

    Raises:
        ValueError: If a type is claimed twice or left without a rule
    """
    table: dict[str, ElementRule] = {}
    for rule in rules:
        for element_type in rule.types:
            if element_type.value in table:
                raise ValueError(f"Element type '{element_type.value}' claimed by both "
                                 f"{table[element_type.value].name} and {rule.name}")
            table[element_type.value] = rule

    missing = [t.value for t in ElementType if t.value not in table]
    if missing:
        raise ValueError(f"No rule for element types: {', '.join(missing)}")

    logger.debug(f"Built rule table for {len(table)} element types from {len(rules)} rules")
    return table


RULES: dict[str, ElementRule] = build_rule_table(create_default_rules())
