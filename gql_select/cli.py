"""Command-line interface for gql-select."""

import logging
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

import click

from .core.catalog import CatalogRegistry
from .core.errors import SelectionError
from .core.expansion import DEFAULT_MAX_DEPTH
from .core.formatting import Formatting
from .core.operation import OPERATION_TYPES, build_operation
from .core.parser import SchemaParser

ARCHIVE_SUFFIXES = (".zip", ".tar.gz", ".tgz")


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    if archive_path.suffix == ".zip":
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif archive_path.name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            if hasattr(tarfile, "data_filter"):
                tar_ref.extractall(temp_dir, filter="data")
            else:
                # Interpreters without extraction filters
                tar_ref.extractall(temp_dir)
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


@click.group()
@click.version_option(package_name="gql-select")
def main():
    """Build GraphQL selection documents from schemas.

    Select fields of a schema type and print the query document.
    """


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file, directory, or archive (.zip, .tar.gz, .tgz).",
)
@click.option(
    "--type",
    "-t",
    "type_name",
    default="Query",
    show_default=True,
    help="Schema type whose fields are selected.",
)
@click.option(
    "--scalars-only",
    is_flag=True,
    help="Select only the leaf fields of the type, without nesting.",
)
@click.option(
    "--indented",
    "-i",
    is_flag=True,
    help="Render one field per line instead of a single compact line.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    envvar="GQL_SELECT_MAX_DEPTH",
    help="Maximum nesting of expanded object fields.",
)
@click.option(
    "--operation",
    "-o",
    "operation_type",
    type=click.Choice(OPERATION_TYPES),
    default=None,
    help="Wrap the selection in an operation of this type.",
)
@click.option(
    "--name",
    "-n",
    default=None,
    help="Operation name (used with --operation).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def render(
    schema: str,
    type_name: str,
    scalars_only: bool,
    indented: bool,
    max_depth: int,
    operation_type: str | None,
    name: str | None,
    verbose: bool,
):
    """Print the document selecting all fields of a schema type.

    Examples:

        gql-select render --schema ./schema --type User

        gql-select render -s ./schema.graphqls -t Query --indented

        gql-select render -s ./schema.tgz -t Order --operation query --name Orders
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    schema_path = Path(schema).resolve()
    temp_dir = None

    try:
        # Handle archives
        actual_schema_path = schema_path
        if schema_path.is_file() and schema_path.name.lower().endswith(ARCHIVE_SUFFIXES):
            if verbose:
                click.echo(f"Extracting archive {schema_path.name}...", err=True)
            temp_dir = extract_archive(schema_path)
            actual_schema_path = Path(temp_dir)

        if verbose:
            click.echo(f"Parsing schema {actual_schema_path}...", err=True)
        ir = SchemaParser(str(actual_schema_path)).parse_all()

        if verbose:
            click.echo(f"  Types: {len(ir.types)}", err=True)
            click.echo(f"  Enums: {len(ir.enums)}", err=True)
            click.echo(f"  Scalars: {len(ir.scalars)}", err=True)

        registry = CatalogRegistry(ir)
        if not registry.has_type(type_name):
            raise click.BadParameter(f"Unknown type: {type_name}", param_hint="--type")

        try:
            tree = registry.new_builder(type_name)
            if scalars_only:
                tree.include_all_scalars()
            else:
                tree.include_all(max_depth=max_depth)
        except SelectionError as e:
            raise click.ClickException(str(e)) from e

        formatting = Formatting.INDENTED if indented else Formatting.COMPACT
        if operation_type:
            document = build_operation(tree, operation_type, name, formatting)
        else:
            document = tree.render(formatting)
        click.echo(document)
    finally:
        # Clean up temp directory
        if temp_dir:
            shutil.rmtree(temp_dir)


if __name__ == "__main__":
    main()
