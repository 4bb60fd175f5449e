from typing import Any
from typing import Dict

OK_EXIT_CODE = 0
FATAL_EXIT_CODE = 2
NOT_COMPILED_EXIT_CODE = 3
PATTERN_ERROR_EXIT_CODE = 4


class CapstanignoreError(Exception):
    """
    Parent class of all exceptions we anticipate in capstanignore

    The command line catches these, prints the message and exits with `code`.
    Problems reading the ignore file are plain OSErrors and are not wrapped.
    """

    def __init__(self, *args: object, code: int = FATAL_EXIT_CODE) -> None:
        self.code = code
        super().__init__(*args)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.__class__.__name__,
            "code": self.code,
            "message": str(self),
        }


class PatternError(CapstanignoreError):
    """
    A single ignore pattern that could not be turned into a matcher.

    Compiling a pattern set reports these and carries on with the rest.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Invalid ignore pattern {pattern!r}: {reason}",
            code=PATTERN_ERROR_EXIT_CODE,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "pattern": self.pattern}


class NotCompiledError(CapstanignoreError):
    """
    Raised when a pattern set is queried before compile(), or after patterns
    were added since the last compile().
    """

    def __init__(self, *args: object) -> None:
        super().__init__(*args, code=NOT_COMPILED_EXIT_CODE)
