from typing import Optional
from typing import Sequence

import click

from capstanignore.commands.options import load_pattern_set
from capstanignore.commands.options import pattern_options
from capstanignore.commands.wrapper import handle_command_errors
from capstanignore.constants import Colors
from capstanignore.error import OK_EXIT_CODE
from capstanignore.util import with_color


@click.command(name="check")
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if any ignore pattern is invalid instead of skipping it.",
)
@pattern_options
@handle_command_errors
def check(
    paths: Sequence[str],
    strict: bool,
    ignore_file: Optional[str],
    patterns: Sequence[str],
    quiet: bool,
    verbose: bool,
    debug: bool,
) -> int:
    """
    Tell whether each root-relative PATH would be left out of the package.
    """
    pattern_set = load_pattern_set(
        ignore_file, patterns, quiet=quiet, verbose=verbose, debug=debug
    )
    matcher = pattern_set.compile(strict=strict)

    for path in paths:
        pattern = matcher.matching_pattern(path)
        if pattern is None:
            click.echo(f"{with_color(Colors.green, 'kept')}    {path}")
        else:
            click.echo(
                f"{with_color(Colors.yellow, 'ignored')} {path} "
                + with_color(Colors.gray, f"({pattern})")
            )
    return OK_EXIT_CODE
