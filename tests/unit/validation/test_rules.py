"""Tests for element rules."""

import pytest

from slatecheck.config import ValidatorConfig
from slatecheck.constants import ElementType
from slatecheck.validation.framework import ErrorKind
from slatecheck.validation.rules import (
    RULES,
    BlockRule,
    CodeBlockRule,
    ImageRule,
    LinkRule,
    ListItemRule,
    ListRule,
    TableRowRule,
    build_rule_table,
    child_type_of,
    create_default_rules,
    is_numeric,
)


@pytest.fixture
def config():
    """Default validator configuration."""
    return ValidatorConfig()


class TestRuleTable:
    """Coverage of the element type enumeration."""

    def test_every_element_type_has_a_rule(self):
        assert set(RULES) == {t.value for t in ElementType}

    def test_duplicate_type_rejected(self):
        with pytest.raises(ValueError, match="claimed by both"):
            build_rule_table(create_default_rules() + [BlockRule()])

    def test_missing_type_rejected(self):
        rules = [rule for rule in create_default_rules() if not isinstance(rule, ImageRule)]
        with pytest.raises(ValueError, match="img"):
            build_rule_table(rules)

    def test_rule_names_unique(self):
        names = [rule.name for rule in create_default_rules()]
        assert len(names) == len(set(names))


class TestChildChecks:
    """Child-type constraint checks."""

    def test_unconstrained_rule_accepts_anything(self):
        node = {"type": "p", "children": []}
        assert BlockRule().check_child(node, 0, 42, ["root[0]"]) is None

    def test_list_rejects_paragraph(self):
        node = {"type": "ol", "children": []}
        violation = ListRule().check_child(node, 2, {"type": "p"}, ["root[0]"])
        assert violation.kind == ErrorKind.INVALID_STRUCTURE
        assert violation.error_key == "ol_invalid_structure"
        assert violation.path == ["root[0]", "ol[2]"]
        assert violation.error.startswith("List (ol) at path root[0]")

    def test_row_accepts_both_cell_types(self):
        node = {"type": "tr", "children": []}
        rule = TableRowRule()
        assert rule.check_child(node, 0, {"type": "th"}, []) is None
        assert rule.check_child(node, 1, {"type": "td"}, []) is None

    def test_code_block_message(self):
        node = {"type": "code_block", "children": []}
        violation = CodeBlockRule().check_child(node, 0, {"text": "x"}, ["root[0]"])
        assert violation.user_friendly_message.startswith("There is an issue with the code block structure")

    def test_check_does_not_modify_rule(self):
        rule = ListRule()
        rule.check_child({"type": "ul", "children": []}, 0, {"type": "p"}, [])
        assert rule.label_for("ol") == "List (ol)"

    @pytest.mark.parametrize("child,expected", [
        ({"type": "li"}, "li"),
        ({"text": "x"}, None),
        ({"type": 3}, None),
        ("li", None),
    ])
    def test_child_type_of(self, child, expected):
        assert child_type_of(child) == expected


class TestAttributeChecks:
    """Image and link attribute checks."""

    def test_image_valid(self, config):
        node = {"type": "img", "children": [], "url": "a.png", "width": 1, "height": "2"}
        assert ImageRule().check_attributes(node, ["root[0]"], config) is None

    def test_image_non_string_url(self, config):
        node = {"type": "img", "children": [], "url": 7, "width": 1, "height": 2}
        violation = ImageRule().check_attributes(node, ["root[0]"], config)
        assert violation.error_key == "img_invalid_content"
        assert violation.node_type == "img"

    def test_link_valid(self, config):
        node = {"type": "a", "children": [], "url": ""}
        assert LinkRule().check_attributes(node, [], config) is None

    def test_link_missing_url(self, config):
        violation = LinkRule().check_attributes({"type": "a", "children": []}, ["root[0]"], config)
        assert violation.error == "Link (a) at path root[0] has an invalid 'url' property."


class TestRecursion:
    """Which rules visit children."""

    def test_image_never_recurses(self, config):
        assert ImageRule().recurses(config) is False

    def test_list_item_follows_config(self):
        rule = ListItemRule()
        assert rule.recurses(ValidatorConfig()) is True
        assert rule.recurses(ValidatorConfig(recurse_list_items=False)) is False

    def test_describe(self, config):
        summary = TableRowRule().describe(config)
        assert summary == {"types": "tr", "children": "th | td", "recurses": "yes"}


class TestIsNumeric:
    """Numeric checks for image dimensions."""

    @pytest.mark.parametrize("value", [0, 10, 10 ** 400, 1.5, "12", " 12 ", "-3.5", "1e3"])
    def test_numeric(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", [None, True, False, "", "abc", "nan", "inf", float("nan"), float("-inf"), [], {}])
    def test_not_numeric(self, value):
        assert not is_numeric(value)
