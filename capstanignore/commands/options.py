from typing import Callable
from typing import List
from typing import Optional
from typing import Sequence

import click
from click_option_group import MutuallyExclusiveOptionGroup
from click_option_group import optgroup

from capstanignore.env import Env
from capstanignore.pattern_set import PatternSet
from capstanignore.util import set_flags

_pattern_options: List[Callable] = [
    click.help_option("--help", "-h"),
    click.option(
        "--ignore-file",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Ignore file to read. Defaults to the ignore file in the current directory, if there is one.",
    ),
    click.option(
        "--pattern",
        "-p",
        "patterns",
        multiple=True,
        help="Extra pattern to ignore, on top of the ignore file. May be repeated.",
    ),
    optgroup.group("Verbosity options", cls=MutuallyExclusiveOptionGroup),
    optgroup.option("-q", "--quiet", is_flag=True),
    optgroup.option("-v", "--verbose", is_flag=True),
    optgroup.option("--debug", is_flag=True),
]


def pattern_options(func: Callable) -> Callable:
    for option in reversed(_pattern_options):
        func = option(func)
    return func


def load_pattern_set(
    ignore_file: Optional[str],
    patterns: Sequence[str],
    *,
    quiet: bool,
    verbose: bool,
    debug: bool,
) -> PatternSet:
    env = Env()
    set_flags(verbose=verbose, debug=debug, quiet=quiet, env=env)
    if ignore_file is not None:
        pattern_set = PatternSet.initialize(ignore_file)
    else:
        pattern_set = PatternSet.from_project(".", env)
    pattern_set.add_patterns(patterns)
    return pattern_set
