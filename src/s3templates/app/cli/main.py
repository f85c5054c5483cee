"""CLI main entry point."""

import json
import sys

import click

from ...client import create_resolver
from ...core import ProviderError, TemplateProviderConfig, TemplateResolver


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--bucket", envvar="AWS_TEMPLATE_BUCKET", help="Bucket holding the templates")
@click.option(
    "--search-path",
    "-I",
    multiple=True,
    help="Directory tried after the bare name (repeatable, in priority order)",
)
@click.option("--endpoint-url", help="Custom S3 endpoint URL")
@click.option("--region", help="AWS region")
@click.option("--profile", help="AWS profile to use")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    bucket: str | None,
    search_path: tuple[str, ...],
    endpoint_url: str | None,
    region: str | None,
    profile: str | None,
) -> None:
    """s3templates - Inspect templates stored in an S3 bucket."""
    config = TemplateProviderConfig.from_env(
        bucket_name=bucket,
        search_path=search_path or None,
        log_level="WARNING",
        endpoint_url=endpoint_url,
        region=region,
        profile=profile,
    )
    if debug:
        config.log_level = "DEBUG"
    ctx.obj = create_resolver(config)


@cli.command()
@click.argument("name")
@click.pass_obj
def paths(resolver: TemplateResolver, name: str) -> None:
    """Print the candidate keys for a template name."""
    for key in resolver.candidates(name):
        click.echo(key)


@cli.command()
@click.argument("name")
@click.pass_obj
def stat(resolver: TemplateResolver, name: str) -> None:
    """Show which key a template resolves to and when it was modified."""
    try:
        handle = resolver.resolve(name)
    except ProviderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if handle is None:
        click.echo(f"Error: object ({name}) not found", err=True)
        sys.exit(1)

    modified = resolver.modified_time(name)
    output = {
        "name": name,
        "key": handle.key,
        "last_modified": modified.isoformat() if modified else None,
    }
    click.echo(json.dumps(output, indent=2))


@cli.command()
@click.argument("name")
@click.pass_obj
def cat(resolver: TemplateResolver, name: str) -> None:
    """Write a template's content to stdout."""
    try:
        content = resolver.content(name)
    except ProviderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.get_binary_stream("stdout").write(content.data)


@cli.command(name="ls")
@click.pass_obj
def list_templates(resolver: TemplateResolver) -> None:
    """List every key in the bucket."""
    try:
        resolver.refresh()
    except ProviderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for key in sorted(resolver.cache.keys()):
        click.echo(key)


def main() -> None:
    """Main entry point."""
    cli()
