"""Tests for the command-line interface."""

import shutil
import tarfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from gql_resolvergen.cli import extract_archive, main

from conftest import CONTEXT_FILE, MODELS_FILE, SCHEMA_FILE, normalize_whitespace


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path) -> Path:
    """A project directory with schema, models and context copied in."""
    for source in (SCHEMA_FILE, MODELS_FILE, CONTEXT_FILE):
        shutil.copy(source, tmp_path / source.name)
    (tmp_path / "resolvergen.yml").write_text(
        "schema: ./schema.graphql\n"
        "output: ./generated/resolvers.ts\n"
        "context: ./context.ts:Context\n"
        "models:\n"
        "  files: [./models.ts]\n"
        "format: false\n"
    )
    return tmp_path


def test_generate_from_config(runner, project):
    result = runner.invoke(main, ["generate", "-c", str(project / "resolvergen.yml")])
    assert result.exit_code == 0, result.output
    assert "Done!" in result.output

    code = normalize_whitespace((project / "generated" / "resolvers.ts").read_text())
    assert "import { Context } from '../context'" in code
    assert "import { User } from '../models'" in code
    assert "name: (parent: User) => parent.name === undefined ? null : parent.name," in code
    assert "export interface ArgsCreatePost { data: PostInput }" in code


def test_generate_with_options_only(runner, tmp_path):
    output = tmp_path / "resolvers.ts"
    result = runner.invoke(
        main,
        ["generate", "-s", str(SCHEMA_FILE), "-o", str(output), "--no-format"],
    )
    assert result.exit_code == 0, result.output

    code = normalize_whitespace(output.read_text())
    assert "type Context = any" in code
    assert "export const defaultResolvers = {}" in code


def test_output_option_overrides_config(runner, project, tmp_path):
    other = tmp_path / "elsewhere" / "types.ts"
    result = runner.invoke(
        main,
        ["generate", "-c", str(project / "resolvergen.yml"), "-o", str(other)],
    )
    assert result.exit_code == 0, result.output
    assert other.exists()
    assert not (project / "generated" / "resolvers.ts").exists()


def test_missing_model_declaration_fails(runner, project):
    config = project / "resolvergen.yml"
    config.write_text(
        "schema: ./schema.graphql\n"
        "output: ./generated/resolvers.ts\n"
        "models:\n"
        "  override:\n"
        "    Post: ./models.ts:PostRecord\n"
        "format: false\n"
    )
    result = runner.invoke(main, ["generate", "-c", str(config)])

    assert result.exit_code == 1
    assert not (project / "generated" / "resolvers.ts").exists()


def test_malformed_model_file_fails(runner, project):
    (project / "models.ts").write_text("export interface User { id: { a: string }\n")
    result = runner.invoke(main, ["generate", "-c", str(project / "resolvergen.yml")])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert not (project / "generated" / "resolvers.ts").exists()


def test_header_from_config(runner, project):
    config = project / "resolvergen.yml"
    config.write_text(config.read_text() + "header: '/* eslint-disable */'\n")
    result = runner.invoke(main, ["generate", "-c", str(config)])

    assert result.exit_code == 0, result.output
    code = (project / "generated" / "resolvers.ts").read_text()
    assert code.startswith("/* eslint-disable */\n\n// Code generated by gql-resolvergen")


def test_excluded_types_are_not_imported(runner, project):
    config = project / "resolvergen.yml"
    config.write_text(config.read_text() + "exclude_prefix: Us\n")
    result = runner.invoke(main, ["generate", "-c", str(config)])

    assert result.exit_code == 0, result.output
    code = (project / "generated" / "resolvers.ts").read_text()
    assert "import { User }" not in code
    assert "import { Post } from '../models'" in code


def test_invalid_config_fails(runner, tmp_path):
    config = tmp_path / "resolvergen.yml"
    config.write_text("schema: ./schema.graphql\n")
    result = runner.invoke(main, ["generate", "-c", str(config)])
    assert result.exit_code == 1


def test_requires_config_or_paths(runner, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(main, ["generate"])
    assert result.exit_code == 2
    assert "resolvergen.yml" in result.output


def test_default_config_in_working_directory(runner, project, monkeypatch):
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generate"])
    assert result.exit_code == 0, result.output
    assert (project / "generated" / "resolvers.ts").exists()


def test_schema_archive(runner, tmp_path):
    archive = tmp_path / "schema.tgz"
    with tarfile.open(archive, "w:gz") as tar:
        tar.add(SCHEMA_FILE, arcname="schema.graphql")
    output = tmp_path / "resolvers.ts"

    result = runner.invoke(
        main, ["generate", "-s", str(archive), "-o", str(output), "--no-format"]
    )

    assert result.exit_code == 0, result.output
    assert "Extracting archive" in result.output
    assert "export namespace MutationResolvers" in output.read_text()


def test_extract_archive_rejects_unknown_format(tmp_path):
    bogus = tmp_path / "schema.rar"
    bogus.write_text("")
    with pytest.raises(ValueError, match="Unsupported"):
        extract_archive(bogus)


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
