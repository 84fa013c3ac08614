"""Unit tests for utility helper functions."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from json2struct.utils.exceptions import SampleLoadError
from json2struct.utils.helpers import (
    escape_annotation,
    load_sample,
    root_name_from_path,
    safe_json_parse,
)


class TestSafeJsonParse:
    """Test JSON parsing."""

    def test_parse_bytes(self):
        result = safe_json_parse(b'{"key": "value"}')
        assert result == {"key": "value"}

    def test_parse_string(self):
        result = safe_json_parse('{"key": "value"}')
        assert result == {"key": "value"}

    def test_parse_invalid_json(self):
        result = safe_json_parse(b'not json')
        assert result is None

    def test_parse_non_object_values(self):
        assert safe_json_parse('[1, 2]') == [1, 2]
        assert safe_json_parse('"text"') == "text"

    def test_parse_unsupported_input(self):
        assert safe_json_parse(12345) is None
        assert safe_json_parse({"key": "value"}) is None

    def test_parse_bytes_with_bom(self):
        result = safe_json_parse(b'\xef\xbb\xbf{"a": 1}')
        assert result == {"a": 1}

    def test_parse_invalid_utf8(self):
        assert safe_json_parse(b'\xff\xfe{') is None


class TestLoadSample:
    """Test sample file loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "sample.json"
        path.write_text('{"id": 1, "tags": ["a"]}')
        assert load_sample(path) == {"id": 1, "tags": ["a"]}

    def test_missing_file(self, tmp_path):
        with pytest.raises(SampleLoadError, match="not found"):
            load_sample(tmp_path / "missing.json")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("   \n")
        with pytest.raises(SampleLoadError, match="empty"):
            load_sample(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"a": ')
        with pytest.raises(SampleLoadError, match="Invalid JSON"):
            load_sample(path)

    def test_null_document_is_returned(self, tmp_path):
        path = tmp_path / "null.json"
        path.write_text("null")
        assert load_sample(path) is None


class TestRootNameFromPath:
    """Test root record naming from file names."""

    @pytest.mark.parametrize("path,expected", [
        ("user_data.json", "UserData"),
        ("/tmp/samples/api-response.json", "ApiResponse"),
        (Path("orders.v2.json"), "Orders"),
        ("C:\\data\\my file.json", "MyFile"),
        ("", "Root"),
        (None, "Root"),
        ("___.json", "Root"),
    ])
    def test_names(self, path, expected):
        assert root_name_from_path(path) == expected

    def test_custom_default(self):
        assert root_name_from_path(None, default="payload") == "Payload"


class TestEscapeAnnotation:
    """Test annotation escaping."""

    def test_comment_terminators(self):
        assert escape_annotation("a */ b") == "a * / b"
        assert escape_annotation("see //here") == "see / /here"

    def test_newlines(self):
        assert escape_annotation(" line one\nline two\r\n") == "line one line two"
