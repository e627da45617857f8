""" Command line: generate short ids

Example:
    $ short-id random
    X7K9mP2nQwE-Tg
    $ short-id ordered --bytes 16 --count 2
    AAYH2n-eK1OyqwAbcDeFgQ
    AAYH2n-eK1Pg_wxYz0123w
"""

from __future__ import annotations

import logging
from typing import Optional

import pydantic as pd
import typer

from .errors import ClockUnavailable, InvalidArgument
from .generator import ShortIdGenerator, default_generator
from .settings import Settings
from . import logging as short_id_logging


logger = logging.getLogger(__name__)

app = typer.Typer(
    help='Generate short, url-safe ids',
    no_args_is_help=True,
)


class State:
    """ Objects shared by commands """
    settings: Settings
    generator: ShortIdGenerator = default_generator


state = State()


@app.callback()
def main():
    """ Generate short, url-safe ids """
    try:
        state.settings = Settings()
    except pd.ValidationError as e:
        for error in e.errors():
            field = '.'.join(str(loc) for loc in error['loc'])
            typer.echo(f"Error: invalid setting 'SHORT_ID_{field}': {error['msg']}", err=True)
        raise typer.Exit(2) from e

    short_id_logging.basicConfig(state.settings.LOG_LEVEL)


@app.command()
def random(
    bytes: Optional[int] = typer.Option(None, '--bytes', '-b', help='Number of random bytes: 1..32'),
    count: int = typer.Option(1, '--count', '-n', min=1, help='Number of ids to generate'),
):
    """ Generate random ids """
    _generate(state.generator.random_with_bytes, bytes, count)


@app.command()
def ordered(
    bytes: Optional[int] = typer.Option(None, '--bytes', '-b', help='Number of bytes, timestamp included: 8..32'),
    count: int = typer.Option(1, '--count', '-n', min=1, help='Number of ids to generate'),
):
    """ Generate ordered ids: they start with the current time """
    _generate(state.generator.ordered_with_bytes, bytes, count)


def _generate(generate, bytes: Optional[int], count: int):
    """ Print `count` ids, one per line

    Args:
        bytes: The `--bytes` option. None: take the `SHORT_ID_BYTES` setting
    """
    # Blame the option or the setting: whichever the value came from
    if bytes is not None:
        n, param_hint = bytes, "'--bytes'"
    else:
        n, param_hint = state.settings.BYTES, "'SHORT_ID_BYTES' setting"

    logger.debug('Generating %d ids from %d bytes', count, n)

    try:
        for _ in range(count):
            typer.echo(generate(n))
    except InvalidArgument as e:
        raise typer.BadParameter(e.error, param_hint=param_hint) from e
    except ClockUnavailable as e:
        typer.echo(f'Error: {e.error}. {e.fixit}', err=True)
        raise typer.Exit(1) from e
