"""
The ordered set of ignore patterns used for one packaging run.

To use, create a PatternSet (usually through PatternSet.initialize with the
project's .capstanignore), add any extra patterns, then call compile() once
and query the returned IgnoreMatcher for every candidate path.
"""
from pathlib import Path
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence
from typing import Set
from typing import TextIO
from typing import Tuple
from typing import Union

import click
from attrs import define
from attrs import field

from capstanignore.constants import BUILTIN_PATTERNS
from capstanignore.constants import COMMENT_PREFIX
from capstanignore.env import Env
from capstanignore.error import NotCompiledError
from capstanignore.error import PatternError
from capstanignore.matcher import IgnoreMatcher
from capstanignore.matcher import PathLike
from capstanignore.translate import CompiledPattern
from capstanignore.translate import compile_pattern
from capstanignore.translate import normalize
from capstanignore.verbose_logging import getLogger

logger = getLogger(__name__)


def parse_lines(lines: Iterable[str]) -> Iterator[str]:
    """Drops blank lines and comment lines, strips the rest"""
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        yield stripped


@define
class PatternSet:
    """
    Raw ignore patterns in insertion order, built-ins first.

    The built-ins cannot be removed; `extra_builtins` only adds to them.
    Adding a pattern after compile() makes the set stale: compile() has to
    be called again before is_ignored() on the set answers, while matchers
    returned earlier keep working with the patterns they were built from.
    """

    extra_builtins: Tuple[str, ...] = ()
    _patterns: List[str] = field(init=False, factory=list)
    _matcher: Optional[IgnoreMatcher] = field(init=False, default=None)
    _stale: bool = field(init=False, default=False)
    _builtin_count: int = field(init=False, default=0)

    def __attrs_post_init__(self) -> None:
        self.add_patterns(BUILTIN_PATTERNS + tuple(self.extra_builtins))
        self._builtin_count = len(self._patterns)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "PatternSet":
        """Builds a set from already read ignore file contents"""
        pattern_set = cls()
        pattern_set.add_patterns(parse_lines(lines))
        return pattern_set

    @classmethod
    def initialize(cls, source: Union[None, str, Path] = None) -> "PatternSet":
        """
        Builds a set from the ignore file at `source`.

        A missing or empty `source` gives a set with only the built-ins.

        :raises OSError: if the file exists but cannot be read
        """
        if not source:
            return cls()

        path = Path(source)
        if not path.exists():
            logger.verbose(f"No ignore file at {path}, using built-in patterns only")
            return cls()

        try:
            with path.open(encoding="utf-8-sig") as f:
                pattern_set = cls.from_lines(f)
        except OSError as e:
            logger.error(f"Could not read ignore file {path}: {e}")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"Could not read ignore file {path}: {e}")
            raise OSError(f"Ignore file {path} is not valid UTF-8 text") from e

        logger.verbose(
            f"Loaded {len(pattern_set.user_patterns)} ignore patterns from {path}"
        )
        return pattern_set

    @classmethod
    def from_project(
        cls, root: Union[str, Path], env: Optional[Env] = None
    ) -> "PatternSet":
        """Builds a set from the ignore file directly under `root`, if any"""
        env = env or Env()
        ignore_file = Path(root) / env.ignore_filename
        return cls.initialize(ignore_file if ignore_file.is_file() else None)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns)

    @property
    def user_patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns[self._builtin_count :])

    @property
    def is_compiled(self) -> bool:
        return self._matcher is not None and not self._stale

    def add_pattern(self, text: str) -> None:
        stripped = text.strip()
        pattern = normalize(stripped)
        if pattern == normalize(""):
            logger.debug(f"Skipping empty ignore pattern {text!r}")
            return
        self._patterns.append(pattern)
        if self._matcher is not None:
            self._stale = True

    def add_patterns(self, texts: Iterable[str]) -> None:
        for text in texts:
            self.add_pattern(text)

    def compile(self, *, strict: bool = False) -> IgnoreMatcher:
        """
        Compiles every pattern, from scratch, into a new IgnoreMatcher.

        A pattern that cannot be compiled is reported and left out; the
        others still apply. The errors are available as `matcher.errors`.

        :param strict: raise the first PatternError instead of carrying on
        """
        compiled: List[CompiledPattern] = []
        errors: List[PatternError] = []
        reported: Set[str] = set()
        for pattern in self._patterns:
            try:
                compiled.append(compile_pattern(pattern))
            except PatternError as e:
                if strict:
                    raise
                if pattern in reported:
                    continue
                reported.add(pattern)
                logger.warning(f"{e}; this pattern will not ignore anything")
                errors.append(e)

        matcher = IgnoreMatcher(tuple(compiled), tuple(errors))
        self._matcher = matcher
        self._stale = False
        logger.verbose(
            f"Compiled {len(compiled)} ignore patterns"
            + (f" ({len(errors)} invalid)" if errors else "")
        )
        return matcher

    @property
    def matcher(self) -> IgnoreMatcher:
        if self._matcher is None:
            raise NotCompiledError("Ignore patterns were queried before compile()")
        if self._stale:
            raise NotCompiledError(
                "Ignore patterns were added after compile(); compile() again"
            )
        return self._matcher

    def is_ignored(self, path: PathLike) -> bool:
        return self.matcher.is_ignored(path)

    def format_patterns(self) -> Sequence[str]:
        return list(self._patterns)

    def print_patterns(self, file: Optional[TextIO] = None) -> None:
        for pattern in self.format_patterns():
            click.echo(pattern, file=file)


initialize = PatternSet.initialize
