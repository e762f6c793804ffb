"""Unit tests for reading documents from disk."""

import json

import pytest

from slatecheck.exceptions import DocumentLoadError, SlatecheckError
from slatecheck.loader import load_document


class TestLoadDocument:
    """Test load_document."""

    def test_load_array(self, tmp_path):
        path = tmp_path / "doc.json"
        document = [{"type": "p", "children": [{"text": "hi"}]}]
        path.write_text(json.dumps(document), encoding="utf-8")

        assert load_document(path) == document

    def test_load_keeps_non_array_shape(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text('{"type": "p"}', encoding="utf-8")

        assert load_document(path) == {"type": "p"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentLoadError, match="not found") as exc_info:
            load_document(tmp_path / "missing.json")
        assert exc_info.value.source.endswith("missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "doc.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(SlatecheckError, match="Invalid JSON"):
            load_document(path)
