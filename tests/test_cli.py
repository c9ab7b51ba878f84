import json
from pathlib import Path

from click.testing import CliRunner

from rest_spec_validator.cli import main

FIXTURES = Path(__file__).parent / "fixtures"
SCHEMA = str(FIXTURES / "schema.json")
SPEC_DIR = str(FIXTURES / "rest-api-spec")


class TestCliCheck:
    def test_check_text_report(self):
        runner = CliRunner()
        result = runner.invoke(main, ["check", SCHEMA, SPEC_DIR, "--no-color"])

        assert result.exit_code == 0
        assert (
            "The GetRequest definition does not include the query parameter preference "
            "which is present in the json spec"
        ) in result.output
        assert "1 mismatches found in 3 endpoints." in result.output

    def test_check_json_report(self):
        runner = CliRunner()
        result = runner.invoke(main, ["check", SCHEMA, SPEC_DIR, "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total"] == 1
        assert data["diagnostics"][0]["endpoint"] == "get"
        assert data["diagnostics"][0]["name"] == "preference"

    def test_check_only_request(self):
        runner = CliRunner()
        result = runner.invoke(main, ["check", SCHEMA, SPEC_DIR, "--request", "IndexRequest", "--no-color"])

        assert result.exit_code == 0
        assert "0 mismatches found" in result.output

    def test_check_writes_output_file(self, tmp_path):
        output_file = tmp_path / "reports" / "report.json"
        runner = CliRunner()
        result = runner.invoke(main, ["check", SCHEMA, SPEC_DIR, "--format", "json", "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.exists()
        assert json.loads(output_file.read_text())["total"] == 1

    def test_check_missing_spec_fails(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["check", SCHEMA, str(tmp_path)])

        assert result.exit_code == 1
        assert "Can't find the json spec for get" in result.output

    def test_check_missing_definition_fails(self, tmp_path):
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps({"endpoints": [{"name": "get", "request": {"name": "Nope"}}], "types": []}))
        runner = CliRunner()
        result = runner.invoke(main, ["check", str(schema), SPEC_DIR])

        assert result.exit_code == 1
        assert "Can't find the request definition for Nope" in result.output

    def test_check_invalid_model_file(self, tmp_path):
        schema = tmp_path / "schema.json"
        schema.write_text("[]")
        runner = CliRunner()
        result = runner.invoke(main, ["check", str(schema), SPEC_DIR])

        assert result.exit_code == 1
        assert "Invalid model file" in result.output


class TestCliResolve:
    def test_resolve_inherited_properties(self):
        runner = CliRunner()
        result = runner.invoke(main, ["resolve", SCHEMA, "GetRequest"])

        assert result.exit_code == 0
        assert "path: index, id" in result.output
        assert "query: routing, realtime, error_trace, pretty" in result.output
        assert "body: no" in result.output

    def test_resolve_unknown_name(self):
        runner = CliRunner()
        result = runner.invoke(main, ["resolve", SCHEMA, "Refresh"])

        assert result.exit_code == 1
        assert "Can't find the request definition for Refresh" in result.output
