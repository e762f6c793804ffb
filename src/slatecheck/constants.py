"""Constants for slate document validation.

Node types, marks and error-key fragments centralized for easy maintenance.
"""

from enum import Enum
from typing import FrozenSet


class ElementType(str, Enum):
    """Closed set of container (element) node types."""
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    PARAGRAPH = "p"
    BLOCKQUOTE = "blockquote"
    BULLETED_LIST = "ul"
    NUMBERED_LIST = "ol"
    LIST_ITEM = "li"
    LIST_ITEM_CONTENT = "lic"
    TABLE = "table"
    TABLE_ROW = "tr"
    TABLE_HEADER = "th"
    TABLE_CELL = "td"
    IMAGE = "img"
    LINK = "a"
    CODE_BLOCK = "code_block"
    CODE_LINE = "code_line"


ELEMENT_TYPES: FrozenSet[str] = frozenset(t.value for t in ElementType)

# Inline styles allowed on a text leaf besides 'text'
VALID_MARKS: FrozenSet[str] = frozenset({
    "bold", "italic", "underline", "strikethrough", "code"
})

# Containers that must hold at least one child
NON_EMPTY_ELEMENTS: FrozenSet[str] = frozenset({
    "ul", "ol", "li", "code_block", "table", "tr"
})

# Error-key subjects
SLATE_DATA = "slate_data"
TEXT_NODE_TYPE = "text"

# Label used for top-level path entries
ROOT_LABEL = "root"

PATH_SEPARATOR = " > "

DEFAULT_MAX_DEPTH = 128
# Two frames per level must stay below the default recursion limit of 1000
MAX_DEPTH_CEILING = 400

CONFIG_FILENAME = ".slatecheck.json"
