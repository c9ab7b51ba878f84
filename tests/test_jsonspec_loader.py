import json
from pathlib import Path

import pytest

from rest_spec_validator.jsonspec.loader import load_json_spec, parse_json_spec

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadJsonSpec:
    def test_loads_all_endpoints(self):
        specs = load_json_spec(FIXTURES / "rest-api-spec")
        assert list(specs) == ["get", "index", "ping"]

    def test_skips_common(self):
        specs = load_json_spec(FIXTURES / "rest-api-spec")
        assert "_common" not in specs
        assert "documentation" not in specs

    def test_parsed_fields(self):
        specs = load_json_spec(FIXTURES / "rest-api-spec")
        index = specs["index"]
        assert index.url_parts() == ["index", "id"]
        assert list(index.params) == ["refresh"]
        assert index.body.required is True

    def test_rejects_several_endpoints_in_one_file(self, tmp_path):
        (tmp_path / "bad.json").write_text(json.dumps({
            "a": {"url": {"paths": []}},
            "b": {"url": {"paths": []}},
        }))
        with pytest.raises(ValueError, match="bad.json"):
            load_json_spec(tmp_path)

    def test_empty_directory(self, tmp_path):
        assert load_json_spec(tmp_path) == {}


class TestParseJsonSpec:
    def test_returns_name_and_spec(self):
        name, spec = parse_json_spec({"get_doc": {"url": {"paths": [{"parts": {"id": {}}}]}}})
        assert name == "get_doc"
        assert spec.url_parts() == ["id"]

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            parse_json_spec({})
