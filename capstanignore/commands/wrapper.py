import sys
from functools import wraps
from typing import Any
from typing import Callable
from typing import NoReturn

import click

from capstanignore.constants import Colors
from capstanignore.error import CapstanignoreError
from capstanignore.error import FATAL_EXIT_CODE
from capstanignore.error import OK_EXIT_CODE
from capstanignore.verbose_logging import getLogger


def handle_command_errors(func: Callable) -> Callable:
    """
    Adds the following functionality to our subcommands:
    - Subcommands may return an exit code, None meaning OK
    - CapstanignoreError exits with its own code
    - An unreadable ignore file exits with FATAL_EXIT_CODE

    This is a decorator rather than code in __main__ so that
    click.testing.CliRunner sees the same behavior.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> NoReturn:
        # silence root level logger otherwise logs higher
        # than warning are handled twice
        logger = getLogger("capstanignore")
        logger.propagate = False

        try:
            exit_code = func(*args, **kwargs)
        except CapstanignoreError as e:
            click.secho(str(e), fg=Colors.red.value, err=True)
            exit_code = e.code
        except OSError as e:
            click.secho(str(e), fg=Colors.red.value, err=True)
            exit_code = FATAL_EXIT_CODE
        if exit_code is None:
            exit_code = OK_EXIT_CODE

        sys.exit(exit_code)

    return wrapper
