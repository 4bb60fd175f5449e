import os
from typing import Iterable
from typing import Optional
from typing import overload
from typing import Union

from attr import Factory
from attr import field
from attr import frozen

from capstanignore.constants import DEFAULT_IGNORE_FILENAME


def flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() not in ("", "0", "false", "no")


@overload
def EnvFactory(envvars: Union[str, Iterable[str]], default: str) -> str:
    ...


@overload
def EnvFactory(envvars: Union[str, Iterable[str]]) -> Optional[str]:
    ...


def EnvFactory(
    envvars: Union[str, Iterable[str]], default: Optional[str] = None
) -> Optional[str]:
    if isinstance(envvars, str):
        envvars = [envvars]

    def env_getter() -> Optional[str]:
        for envvar in envvars:
            if os.getenv(envvar):
                return os.getenv(envvar)
        return default

    return Factory(env_getter)


@frozen
class Env:
    """Returns the value of an environment variable at the time Env() is built.

    Read per invocation rather than at import time, so tests and long-lived
    callers see changes made to the environment in between.
    """

    ignore_filename: str = field(
        default=EnvFactory("CAPSTANIGNORE_FILENAME", DEFAULT_IGNORE_FILENAME)
    )
    force_color: bool = field(
        default=EnvFactory("CAPSTANIGNORE_FORCE_COLOR"), converter=flag
    )
    no_color: bool = field(
        default=EnvFactory(["NO_COLOR", "CAPSTANIGNORE_FORCE_NO_COLOR"]),
        converter=flag,
    )
