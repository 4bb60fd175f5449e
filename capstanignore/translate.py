"""
Translates capstanignore glob patterns into anchored regular expressions.

The dialect is deliberately small:

- `/**/` matches zero or more path components (both slashes are absorbed,
  so `/**/name` matches `/name` as well as `/a/b/name`, and in fact any path
  ending in `name`)
- a trailing bare `/*` matches everything below the prefix, at any depth,
  but not the prefix itself
- any other `*` matches within a single path component
- everything else is literal

Note the asymmetry: `/dir/*` is recursive while `/dir/*.txt` is not. This is
how existing ignore files are written, so it is kept as is.
"""
import re
from typing import Iterator
from typing import List
from typing import Pattern

from attrs import frozen

from capstanignore.constants import ANY_CHARS_RE
from capstanignore.constants import ANY_DESCENDANT_RE
from capstanignore.constants import DOUBLE_STAR_SEGMENT
from capstanignore.constants import FORBIDDEN_PATTERN_CHARS
from capstanignore.constants import PATH_SEP
from capstanignore.constants import SEGMENT_CHARS_RE
from capstanignore.constants import STAR
from capstanignore.constants import TRAILING_STAR_SEGMENT
from capstanignore.error import PatternError
from capstanignore.verbose_logging import getLogger

logger = getLogger(__name__)

ESCAPED_STAR = re.escape(STAR)


@frozen
class CompiledPattern:
    """
    A raw pattern together with its compiled, anchored regex.

    Immutable, so a single instance can be queried from many threads.
    """

    raw: str
    regex: Pattern[str]

    def matches(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None


def normalize(text: str) -> str:
    """
    Root a pattern or path: exactly one leading separator, no trailing one.

    The root itself normalizes to "/". Whitespace is significant here; the
    pattern set strips it from ignore file lines before they get this far.
    """
    return PATH_SEP + text.strip(PATH_SEP)


def _segment_to_regex(chunk: str) -> str:
    """Escape a chunk of pattern that contains no `/**/`; `*` stays in its segment"""
    return re.escape(chunk).replace(ESCAPED_STAR, SEGMENT_CHARS_RE)


def _chunks_to_regex(chunks: List[str]) -> Iterator[str]:
    *leading, last = chunks
    for chunk in leading:
        yield _segment_to_regex(chunk)
        yield ANY_CHARS_RE

    if last.endswith(TRAILING_STAR_SEGMENT):
        # Handles:
        #   /dir/*
        #   /**/dir/*
        # but not /dir/**/* whose last '*' has no separator left in front of it
        yield _segment_to_regex(last[: -len(TRAILING_STAR_SEGMENT)])
        yield ANY_DESCENDANT_RE
    else:
        yield _segment_to_regex(last)


def translate(pattern: str) -> str:
    """
    Returns the regex source matching exactly the paths `pattern` ignores.

    The result is deterministic and anchored at both ends.
    """
    chunks = pattern.split(DOUBLE_STAR_SEGMENT)
    return "^" + "".join(_chunks_to_regex(chunks)) + "$"


def compile_pattern(pattern: str) -> CompiledPattern:
    """
    Translate and compile a single normalized pattern.

    :raises PatternError: if the pattern cannot be turned into a matcher
    """
    bad_chars = FORBIDDEN_PATTERN_CHARS.intersection(pattern)
    if bad_chars:
        raise PatternError(
            pattern,
            "contains control characters "
            + ", ".join(repr(c) for c in sorted(bad_chars)),
        )

    # only escaped text and fixed fragments, never a re.error
    source = translate(pattern)
    regex = re.compile(source)

    logger.debug(f"Compiled ignore pattern {pattern!r} to {source!r}")
    return CompiledPattern(pattern, regex)
