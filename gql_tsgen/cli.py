"""Command-line interface for gql-tsgen."""

import logging
from pathlib import Path

import click

from .core.context import ErrorMode, GenerationContext, unescape_header
from .core.exceptions import ConfigurationError, GqlTsgenError
from .core.generator import CodeGenerator, assemble, write_output
from .core.parser import SchemaParser
from .core.scalars import ScalarRegistry
from .core.shape_builder import CyclePolicy


@click.group(context_settings={"auto_envvar_prefix": "GQL_TSGEN"})
@click.version_option(package_name="gql-tsgen")
def main():
    """GraphQL to TypeScript client generator.

    Generate typed TypeScript interfaces and operation functions from
    GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or a directory of .graphql/.graphqls files.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output TypeScript file (created or truncated).",
)
@click.option(
    "--header",
    required=True,
    help="Code inserted at the top of the file; '\\n' sequences become newlines.",
)
@click.option(
    "--client",
    "-c",
    required=True,
    help="Name of the client object (e.g., apolloClient or client).",
)
@click.option(
    "--error",
    "-e",
    default="",
    help="Any non-empty value makes functions return [data, error] instead of throwing.",
)
@click.option(
    "--scalar",
    multiple=True,
    metavar="NAME=TYPE",
    help="Map a custom scalar to a TypeScript type (repeatable), e.g. DateTime=string.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=None,
    help="Stop expanding response shapes below this many nested levels.",
)
@click.option(
    "--on-cycle",
    type=click.Choice([policy.value for policy in CyclePolicy]),
    default=CyclePolicy.TRUNCATE.value,
    show_default=True,
    help="Truncate self-referencing selections with __typename, or fail.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with Jinja2 templates overriding the built-in ones.",
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
    header: str,
    client: str,
    error: str,
    scalar: tuple[str, ...],
    max_depth: int | None,
    on_cycle: str,
    template_dir: str | None,
    verbose: bool,
):
    """Generate a TypeScript client library from a GraphQL schema.

    Examples:

        gql-tsgen generate -s schema.graphql -o client.ts -c apolloClient \\
            --header "import { gql } from '@apollo/client';"

        gql-tsgen generate -s ./schema -o client.ts -c client -e tuple \\
            --header "import { gql } from 'graphql-tag';\\nimport client from './client';"
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    for option, value in (("--schema", schema), ("--output", output), ("--header", header), ("--client", client)):
        if not value:
            raise click.UsageError(f"All parameters are required; {option} is empty.")

    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    try:
        context = GenerationContext(
            client_name=client,
            header=unescape_header(header),
            error_mode=ErrorMode.from_flag(error),
            max_depth=max_depth,
            on_cycle=CyclePolicy(on_cycle),
            scalars=ScalarRegistry.from_pairs(scalar),
        )
    except ConfigurationError as e:
        raise click.UsageError(e.message) from e

    if verbose:
        click.echo(f"Schema: {schema_path}")
        click.echo(f"Output: {output_path}")
        click.echo(f"Error mode: {context.error_mode.value}")
        custom = context.scalars.custom
        if custom:
            click.echo("Custom scalars: " + ", ".join(f"{k}={v}" for k, v in sorted(custom.items())))

    try:
        # Parse schema
        click.echo("Parsing schema...")
        ir = SchemaParser(str(schema_path)).parse_all()

        if verbose:
            click.echo(f"  Types: {len(ir.types)}")
            click.echo(f"  Scalars: {len(ir.scalars)}")

        # Generate code
        click.echo("Generating code...")
        generator = CodeGenerator(ir, context, template_dir=template_dir)
        result = generator.generate()
        content = assemble(context.header, result)

        write_output(str(output_path), content)
    except ConfigurationError as e:
        raise click.UsageError(e.message) from e
    except GqlTsgenError as e:
        raise click.ClickException(e.message) from e

    click.echo(
        f"Done! Generated {len(result.types)} interfaces, "
        f"{len(result.queries)} queries and {len(result.mutations)} mutations."
    )
    click.echo(f"Output: {output_path}")


if __name__ == "__main__":
    main()
