"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from gql_querygen.cli import main


SDL = """
type Query { user(id: Int!): User! }
type User { id: Int! username: String! best: User old: String @deprecated }
"""


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(SDL)
    return path


def run(*args):
    return CliRunner().invoke(main, ["generate", *map(str, args)])


class TestGenerateCommand:

    def test_generates_documents(self, schema_file, tmp_path):
        out = tmp_path / "out"
        result = run("-s", schema_file, "-o", out, "-d", "1")

        assert result.exit_code == 0, result.output
        assert (out / "queries" / "user.gql").read_text() == (
            "query user($id: Int!){\n"
            "    user(id: $id){\n"
            "        id\n"
            "        username\n"
            "    }\n"
            "}"
        )
        assert "Done! Generated 1 documents" in result.output

    def test_reports_missing_kinds(self, schema_file, tmp_path):
        result = run("-s", schema_file, "-o", tmp_path / "out")
        assert "[gql-querygen warning]: No mutation type found in your schema" in result.output

    def test_include_deprecated_fields(self, schema_file, tmp_path):
        out = tmp_path / "out"
        result = run("-s", schema_file, "-o", out, "-d", "1", "-C")
        assert result.exit_code == 0, result.output
        assert "        old\n" in (out / "queries" / "user.gql").read_text()

    def test_depth_limit_expands_nested(self, schema_file, tmp_path):
        out = tmp_path / "out"
        run("-s", schema_file, "-o", out, "-d", "2")
        assert "        best{\n" in (out / "queries" / "user.gql").read_text()

    def test_header(self, schema_file, tmp_path):
        out = tmp_path / "out"
        run("-s", schema_file, "-o", out, "--header", "Generated for tests")
        assert (out / "queries" / "user.gql").read_text().startswith(
            "# Generated for tests\n\n"
        )

    def test_invalid_depth_limit(self, schema_file, tmp_path):
        result = run("-s", schema_file, "-o", tmp_path / "out", "-d", "0")
        assert result.exit_code == 2

    def test_unknown_type_fails(self, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("type Query { a: Missing }")
        result = run("-s", path, "-o", tmp_path / "out")
        assert result.exit_code == 1
        assert "Unknown type 'Missing'" in result.output

    def test_verbose(self, schema_file, tmp_path):
        result = run("-s", schema_file, "-o", tmp_path / "out", "-v")
        assert result.exit_code == 0, result.output
        assert "  query: 1" in result.output

    def test_invalid_schema_syntax(self, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("type Query {")
        result = run("-s", path, "-o", tmp_path / "out")
        assert result.exit_code == 1
        assert "Invalid schema" in result.output
        assert "Traceback" not in result.output

    def test_invalid_output_reported_and_previous_output_kept(self, schema_file, tmp_path):
        out = tmp_path / "out"
        run("-s", schema_file, "-o", out)
        previous = (out / "queries" / "user.gql").read_text()

        result = run("-s", schema_file, "-o", out, "--header", "note\n}")
        assert result.exit_code == 1
        assert "Generated invalid" in result.output
        assert (out / "queries" / "user.gql").read_text() == previous


class TestOperationFilters:

    @pytest.fixture
    def multi_schema(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text(
            "type Query { user: String users: String _debug: String }\n"
            "type Mutation { createUser: String }\n"
        )
        return path

    def test_skip(self, multi_schema, tmp_path):
        out = tmp_path / "out"
        result = run("-s", multi_schema, "-o", out, "--skip", "_*")
        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in (out / "queries").glob("*.gql")) == [
            "user.gql",
            "users.gql",
        ]

    def test_only_repeatable(self, multi_schema, tmp_path):
        out = tmp_path / "out"
        result = run("-s", multi_schema, "-o", out, "--only", "user", "--only", "create*")
        assert result.exit_code == 0, result.output
        assert [p.name for p in (out / "queries").glob("*.gql")] == ["user.gql"]
        assert [p.name for p in (out / "mutations").glob("*.gql")] == ["createUser.gql"]
