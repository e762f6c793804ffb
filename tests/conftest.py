"""Pytest configuration and fixtures for slatecheck tests."""

import pytest


def text(value="x", **marks):
    """Build a text leaf."""
    return {"text": value, **marks}


def element(node_type, *children, **attributes):
    """Build an element node."""
    return {"type": node_type, "children": list(children), **attributes}


@pytest.fixture
def well_formed_document():
    """Document exercising every element type."""
    return [
        element("h1", text("Release notes", bold=True)),
        element("p", text("See "), element("a", text("the docs", underline=True), url="https://example.com"), text(".")),
        element("blockquote", text("Quoted", italic=True)),
        element(
            "ul",
            element("li", element("lic", text("first"))),
            element("li", element("lic", text("second", strikethrough=True))),
        ),
        element("ol", element("li", element("lic", text("one")))),
        element(
            "table",
            element("tr", element("th", text("Name")), element("th", text("Value"))),
            element("tr", element("td", text("a")), element("td", text("1", code=True))),
        ),
        element("img", text(""), url="https://example.com/a.png", width=640, height="480"),
        element("code_block", element("code_line", text("print('hi')")), element("code_line", text(""))),
        element("h6", text("End")),
    ]
