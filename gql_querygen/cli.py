"""Command-line interface for gql-querygen."""

import logging
from pathlib import Path

import click
from graphql import GraphQLError
from pydantic import ValidationError

from .core.config import DEFAULT_DEPTH_LIMIT, GenerationConfig
from .core.documents import DocumentGenerator
from .core.errors import SchemaLookupError
from .core.hooks import AddHeaderHook, FilterOperationsHook, HookRunner
from .core.parser import SchemaParser
from .core.writer import DocumentWriter


@click.group()
@click.version_option(package_name="gql-querygen")
def main():
    """Generate GraphQL operation documents for testing.

    Every query, mutation and subscription in a schema becomes one .gql
    document selecting all reachable fields.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to a GraphQL schema file or a directory of schema files.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output directory for generated documents.",
)
@click.option(
    "--depth-limit",
    "-d",
    default=DEFAULT_DEPTH_LIMIT,
    show_default=True,
    type=int,
    help="Maximum nesting depth of selections.",
)
@click.option(
    "--exclude-nested-args",
    is_flag=True,
    help="Only add variables for the arguments of root fields.",
)
@click.option(
    "--include-deprecated-fields",
    "-C",
    is_flag=True,
    help="Keep fields marked @deprecated.",
)
@click.option(
    "--only",
    multiple=True,
    metavar="PATTERN",
    help="Only generate root operations matching this glob (repeatable).",
)
@click.option(
    "--skip",
    multiple=True,
    metavar="PATTERN",
    help="Skip root operations matching this glob (repeatable).",
)
@click.option(
    "--header",
    default=None,
    help="Comment line to prepend to every generated file.",
)
@click.option(
    "--no-clean",
    is_flag=True,
    help="Do not remove the output directory before writing.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    depth_limit: int,
    exclude_nested_args: bool,
    include_deprecated_fields: bool,
    only: tuple[str, ...],
    skip: tuple[str, ...],
    header: str | None,
    no_clean: bool,
    verbose: bool,
):
    """Generate operation documents from a GraphQL schema.

    Examples:

        gql-querygen generate --schema ./schema.graphql --output ./gql

        gql-querygen generate -s ./schema -o ./gql --depth-limit 4 -C

        gql-querygen generate -s schema.graphql -o ./gql --skip "_*"
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[gql-querygen %(levelname)s] %(message)s",
    )
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    try:
        config = GenerationConfig(
            depth_limit=depth_limit,
            exclude_nested_args=exclude_nested_args,
            include_deprecated_fields=include_deprecated_fields,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--depth-limit")

    hooks = HookRunner()
    if only or skip:
        hooks.add_pre_hook(FilterOperationsHook(include=only, exclude=skip))
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    if verbose:
        click.echo(f"Schema: {schema_path}")
        click.echo(f"Output: {output_path}")

    click.echo("Parsing schema...")
    try:
        ir = SchemaParser(str(schema_path)).parse_all()
    except GraphQLError as e:
        raise click.ClickException(f"Invalid schema: {e}")

    if verbose:
        click.echo(f"  Types: {len(ir.types)}")
        click.echo(f"  Interfaces: {len(ir.interfaces)}")
        click.echo(f"  Unions: {len(ir.unions)}")
        click.echo(f"  Enums: {len(ir.enums)}")

    click.echo("Generating documents...")
    try:
        result = DocumentGenerator(ir, config, hooks).generate()
    except SchemaLookupError as e:
        raise click.ClickException(str(e))

    for message in result.diagnostics:
        click.echo(f"[gql-querygen warning]: {message}", err=True)

    try:
        written = DocumentWriter(output_path, hooks, clean=not no_clean).write(result)
    except ValueError as e:
        raise click.ClickException(str(e))
    if verbose:
        for kind, documents in result.documents.items():
            click.echo(f"  {kind}: {len(documents)}")
        click.echo(f"  Files: {len(written)}")

    click.echo(f"Done! Generated {len(result.all_documents)} documents in {output_path}")


if __name__ == "__main__":
    main()
