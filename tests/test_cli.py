"""Tests for the command-line interface."""

import shutil
import tarfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from gql_select.cli import extract_archive, main

SDL = """
type Address {
  city: String
  zip: String
}

type User {
  id: ID!
  address: Address
}

type Category {
  id: ID!
  parent: Category
}

type Query {
  me: User
}
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphqls"
    path.write_text(SDL)
    return str(path)


class TestRenderCommand:
    """Tests for `gql-select render`."""

    def test_select_all(self, runner, schema_file):
        result = runner.invoke(main, ["render", "-s", schema_file, "-t", "User"])
        assert result.exit_code == 0
        assert result.output == "{id,address{city,zip}}\n"

    def test_default_type_is_query(self, runner, schema_file):
        result = runner.invoke(main, ["render", "-s", schema_file])
        assert result.exit_code == 0
        assert result.output == "{me{id,address{city,zip}}}\n"

    def test_scalars_only(self, runner, schema_file):
        result = runner.invoke(main, ["render", "-s", schema_file, "-t", "User", "--scalars-only"])
        assert result.output == "{id}\n"

    def test_indented(self, runner, schema_file):
        result = runner.invoke(main, ["render", "-s", schema_file, "-t", "Address", "-i"])
        assert result.output == "{\n  city\n  zip\n}\n"

    def test_operation(self, runner, schema_file):
        result = runner.invoke(
            main, ["render", "-s", schema_file, "--operation", "query", "--name", "Me"]
        )
        assert result.exit_code == 0
        assert result.output == "query Me{me{id,address{city,zip}}}\n"

    def test_unknown_type(self, runner, schema_file):
        result = runner.invoke(main, ["render", "-s", schema_file, "-t", "Nope"])
        assert result.exit_code == 2
        assert "Unknown type: Nope" in result.output

    def test_cyclic_type(self, runner, schema_file):
        result = runner.invoke(main, ["render", "-s", schema_file, "-t", "Category"])
        assert result.exit_code == 1
        assert "exceeds max depth 10" in result.output

    def test_max_depth_from_env(self, runner, schema_file):
        result = runner.invoke(
            main,
            ["render", "-s", schema_file, "-t", "Category"],
            env={"GQL_SELECT_MAX_DEPTH": "2"},
        )
        assert result.exit_code == 1
        assert "exceeds max depth 2" in result.output

    def test_archive(self, runner, tmp_path, schema_file):
        archive = tmp_path / "schema.tgz"
        with tarfile.open(archive, "w:gz") as tar:
            tar.add(schema_file, arcname="schema/schema.graphqls")

        result = runner.invoke(main, ["render", "-s", str(archive), "-t", "User"])
        assert result.exit_code == 0
        assert result.output == "{id,address{city,zip}}\n"

    def test_archive_without_extraction_filters(self, tmp_path, schema_file, monkeypatch):
        archive = tmp_path / "schema.tar.gz"
        with tarfile.open(archive, "w:gz") as tar:
            tar.add(schema_file, arcname="schema.graphqls")

        monkeypatch.delattr(tarfile, "data_filter", raising=False)
        extracted = extract_archive(archive)
        try:
            assert (Path(extracted) / "schema.graphqls").read_text() == SDL
        finally:
            shutil.rmtree(extracted)

    def test_verbose(self, runner, schema_file):
        result = runner.invoke(main, ["render", "-s", schema_file, "-t", "User", "-v"])
        assert result.exit_code == 0
        assert "Types: 4" in result.output
