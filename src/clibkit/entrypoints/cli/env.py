"""Environment commands."""

import click
import click_extra as clickx

from clibkit import env as env_helpers
from clibkit.errors import EnvVarNotSetError

from .helpers import error


@click.group(cls=clickx.ExtraGroup)
def env() -> None:
    """Environment variable commands."""


@env.command()
@click.argument("name")
@click.option("--default", "-d", "default", help="Print this instead of failing when NAME is unset.")
def get(name: str, default: str | None) -> None:
    """Print the value of environment variable NAME."""
    if default is not None:
        click.echo(env_helpers.get_env_or(name, default))
        return
    try:
        click.echo(env_helpers.get_env(name))
    except EnvVarNotSetError as e:
        error(str(e))
        raise click.exceptions.Exit(1) from e
