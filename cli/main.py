"""CLI for the shared settings example."""

import json
from pathlib import Path

import click
from dotenv import load_dotenv

from core.config.builder import ConfigurationBuilder
from core.config.exceptions import ConfigError
from core.utils.logging import setup_logging

DEFAULT_KEYS = ("Example:Value1", "Example:Value2")


def _create_builder(environment: str, content_root: str, required: bool):
    from example_settings import use_shared_settings

    builder = ConfigurationBuilder.create_default(
        content_root=Path(content_root) if content_root else None,
        environment_name=environment,
    )
    return use_shared_settings(builder, optional=not required)


@click.group()
@click.version_option(version="1.0.0", prog_name="shared-settings")
@click.option("--log-level", default=None, help="Log level (default: $LOG_LEVEL or WARNING)")
def cli(log_level: str):
    """Shared Settings CLI - embedded appsettings with overridable defaults."""
    load_dotenv(Path.cwd() / ".env")
    setup_logging(level=log_level)


@cli.command()
@click.option("--environment", "-e", default=None, help="Environment (default: $APP_ENVIRONMENT or Production)")
@click.option("--content-root", "-c", default=None, help="Directory holding appsettings*.json")
@click.option("--required", is_flag=True, help="Fail if an embedded resource is missing")
@click.option("--key", "-k", "keys", multiple=True, help="Key to show (repeatable)")
def show(environment: str, content_root: str, required: bool, keys: tuple):
    """Show configuration values."""
    builder = _create_builder(environment, content_root, required)

    try:
        config = builder.build()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    for key in keys or DEFAULT_KEYS:
        value = config.get(key)
        if isinstance(value, (dict, list)):
            value = json.dumps(value)
        click.echo(f"{key}: {value}")


@cli.command()
@click.option("--environment", "-e", default=None, help="Environment (default: $APP_ENVIRONMENT or Production)")
@click.option("--content-root", "-c", default=None, help="Directory holding appsettings*.json")
def sources(environment: str, content_root: str):
    """List configuration sources in precedence order (later wins)."""
    builder = _create_builder(environment, content_root, required=False)

    click.echo(f"\n{'='*60}")
    click.echo(f"Environment: {builder.environment_name}")
    click.echo(f"{'='*60}\n")

    for index, source in enumerate(builder.sources):
        click.echo(f"  {index}. {source.describe()}")

    click.echo("")


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
