import logging
from typing import Any
from typing import cast
from typing import Optional

VERBOSE = 15


class VerboseLogging(logging.Logger):
    """
    Logger with an extra VERBOSE level sitting between DEBUG and INFO.

    Compile summaries and skipped patterns are logged at this level so that
    `capstanignore -v` shows them without the per-path noise of --debug.
    """

    VERBOSE_LOG_LEVEL = VERBOSE

    def verbose(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(self.VERBOSE_LOG_LEVEL):
            self._log(self.VERBOSE_LOG_LEVEL, msg, args, **kwargs)


def install_verbose_logging() -> None:
    """
    Registers VERBOSE with stdlib logging and makes VerboseLogging the class
    handed out by logging.getLogger.

    Loggers created before this runs are plain logging.Logger instances.
    """
    logging.VERBOSE = VERBOSE  # type: ignore[attr-defined]
    logging.addLevelName(VERBOSE, "VERBOSE")
    logging.setLoggerClass(VerboseLogging)


install_verbose_logging()


def getLogger(name: Optional[str]) -> VerboseLogging:
    """
    logging.getLogger, cast so mypy knows about verbose()
    """
    return cast(VerboseLogging, logging.getLogger(name))
