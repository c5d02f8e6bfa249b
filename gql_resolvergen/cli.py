"""Command-line interface for gql-resolvergen."""

import shutil
import sys
import tarfile
import tempfile
import zipfile
from pathlib import Path

import click
from graphql import GraphQLSyntaxError

from . import __version__
from .config import (
    DEFAULT_CONFIG_FILE,
    ResolverGenConfig,
    build_context,
    build_model_map,
    load_config,
)
from .core.errors import ResolverGenError
from .core.generator import ResolverTypesGenerator
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner, PrettierFormatHook
from .core.introspection import TypeScriptDeclarationReader
from .core.parser import SchemaParser
from .core.scalars import ScalarRegistry
from .log import log, setup_logging

ARCHIVE_SUFFIXES = (".zip", ".tar.gz", ".tgz")


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    if archive_path.suffix == ".zip":
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif archive_path.name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            tar_ref.extractall(temp_dir, filter="data")
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


def _resolve_config(
    config: str | None, schema: str | None, output: str | None
) -> ResolverGenConfig:
    """Merge the config file (if any) with command-line overrides."""
    config_path = Path(config) if config else Path(DEFAULT_CONFIG_FILE)
    if config or config_path.is_file():
        resolved = load_config(config_path)
    elif schema and output:
        resolved = ResolverGenConfig(schema=schema, output=output)
    else:
        raise click.UsageError(
            f"No {DEFAULT_CONFIG_FILE} found; pass --config or both --schema and --output."
        )

    overrides = {}
    if schema:
        overrides["schema_path"] = str(Path(schema).resolve())
    if output:
        overrides["output"] = str(Path(output).resolve())
    return resolved.model_copy(update=overrides)


@click.group()
@click.version_option(__version__)
def main():
    """Generate TypeScript resolver types from GraphQL schemas."""
    pass


@main.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help=f"Path to the config file (default: ./{DEFAULT_CONFIG_FILE} if present).",
)
@click.option(
    "--schema",
    "-s",
    type=click.Path(exists=True),
    help="Path to GraphQL schema file, directory, or archive (.zip, .tar.gz, .tgz).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Output file for the generated resolver types (e.g., resolvers.ts).",
)
@click.option(
    "--no-format",
    is_flag=True,
    help="Skip the prettier formatting pass.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    config: str | None,
    schema: str | None,
    output: str | None,
    no_format: bool,
    verbose: bool,
):
    """Generate resolver types from a GraphQL schema.

    Examples:

        gql-resolvergen generate

        gql-resolvergen generate --config ./resolvergen.yml

        gql-resolvergen generate -s ./schema.graphql -o ./generated/resolvers.ts
    """
    setup_logging(verbose)
    temp_dir = None

    try:
        settings = _resolve_config(config, schema, output)
        schema_path = Path(settings.schema_path)
        output_path = Path(settings.output)

        # Handle archives
        actual_schema_path = schema_path
        if schema_path.is_file() and schema_path.name.lower().endswith(ARCHIVE_SUFFIXES):
            click.echo(f"Extracting archive {schema_path.name}...")
            temp_dir = extract_archive(schema_path)
            actual_schema_path = Path(temp_dir)
            log.debug("Extracted to: %s", temp_dir)

        log.debug("Schema: %s", actual_schema_path)
        log.debug("Output: %s", output_path)

        # Parse schema
        click.echo("Parsing schema...")
        ir = SchemaParser(str(actual_schema_path)).parse_all()

        if verbose:
            click.echo(f"  Object types: {len(ir.object_types())}")
            click.echo(f"  Input types: {len(ir.input_types())}")

        reader = TypeScriptDeclarationReader()
        model_map = build_model_map(settings, ir, reader)
        if verbose:
            click.echo(f"  Models: {len(model_map)}")

        hooks = HookRunner()
        if settings.exclude_prefix:
            hooks.add_pre_hook(FilterTypesHook(exclude_prefix=settings.exclude_prefix))
        if settings.format and not no_format:
            hooks.add_post_hook(PrettierFormatHook())
        if settings.header:
            hooks.add_post_hook(AddHeaderHook(settings.header))

        # Generate code
        click.echo("Generating resolver types...")
        generator = ResolverTypesGenerator(
            ir,
            model_map=model_map,
            context=build_context(settings),
            introspector=reader,
            scalars=ScalarRegistry(settings.scalars),
            template_dir=settings.template_dir,
            hooks=hooks,
        )
        generator.generate(str(output_path))

        click.echo(f"Done! Generated resolver types in {output_path}")
    except (ResolverGenError, GraphQLSyntaxError) as e:
        log.error(str(e))
        sys.exit(1)
    finally:
        # Clean up temp directory
        if temp_dir:
            shutil.rmtree(temp_dir)


if __name__ == "__main__":
    main()
