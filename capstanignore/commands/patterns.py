from typing import Optional
from typing import Sequence

import click

from capstanignore.commands.options import load_pattern_set
from capstanignore.commands.options import pattern_options
from capstanignore.commands.wrapper import handle_command_errors
from capstanignore.constants import Colors
from capstanignore.util import with_color


@click.command(name="patterns")
@pattern_options
@handle_command_errors
def patterns(
    ignore_file: Optional[str],
    patterns: Sequence[str],
    quiet: bool,
    verbose: bool,
    debug: bool,
) -> None:
    """
    Print the effective ignore patterns, built-ins first.
    """
    pattern_set = load_pattern_set(
        ignore_file, patterns, quiet=quiet, verbose=verbose, debug=debug
    )
    if not quiet:
        click.echo(with_color(Colors.cyan, "CAPSTANIGNORE:", bold=True))
    pattern_set.print_patterns()
