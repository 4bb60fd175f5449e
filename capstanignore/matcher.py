import os
from pathlib import PurePath
from typing import Iterable
from typing import Optional
from typing import Tuple
from typing import Union

from attrs import field
from attrs import frozen
from boltons.iterutils import partition

from capstanignore.constants import PATH_SEP
from capstanignore.error import PatternError
from capstanignore.translate import CompiledPattern
from capstanignore.translate import normalize
from capstanignore.verbose_logging import getLogger

logger = getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def normalize_path(path: PathLike) -> Optional[str]:
    """
    Bring a candidate path into the rooted form patterns are written in.

    Returns None when the value cannot be read as a path at all.
    """
    try:
        if isinstance(path, PurePath):
            text = path.as_posix()
        else:
            text = os.fspath(path)
    except TypeError:
        return None
    if not isinstance(text, str):
        # os.fspath happily returns bytes
        return None
    return normalize(text)


def ancestors(path: str) -> Iterable[str]:
    """
    Yields the proper ancestor directories of a normalized path, nearest
    to the root first. The root itself is not yielded.

    >>> list(ancestors("/a/b/c"))
    ['/a', '/a/b']
    """
    parts = path.split(PATH_SEP)[1:-1]
    for i in range(1, len(parts) + 1):
        yield PATH_SEP + PATH_SEP.join(parts[:i])


@frozen
class FilteredPaths:
    """
    The return value of IgnoreMatcher.filter_paths.

    Both lists keep the order the candidates came in.
    """

    kept: Tuple[PathLike, ...]
    removed: Tuple[PathLike, ...] = field(factory=tuple)


@frozen
class IgnoreMatcher:
    """
    Answers "is this path ignored?" against a fixed list of compiled patterns.

    Produced by PatternSet.compile(). There is no mutable state here, so one
    matcher can be shared by any number of threads walking a tree.
    """

    patterns: Tuple[CompiledPattern, ...]
    errors: Tuple[PatternError, ...] = field(factory=tuple)

    def matching_pattern(self, path: PathLike) -> Optional[str]:
        """
        Returns the first pattern (in insertion order) that ignores `path`,
        or None if the path is kept.
        """
        normalized = normalize_path(path)
        if normalized is None:
            logger.debug(f"Not ignoring {path!r}: not a path")
            return None
        for pattern in self.patterns:
            if pattern.matches(normalized):
                logger.debug(f"Ignoring {normalized} due to {pattern.raw}")
                return pattern.raw
        return None

    def is_ignored(self, path: PathLike) -> bool:
        """
        True if any pattern matches the whole of `path`. Never raises.
        """
        return self.matching_pattern(path) is not None

    def _is_pruned(self, path: PathLike) -> bool:
        normalized = normalize_path(path)
        if normalized is None:
            return False
        return any(
            self.is_ignored(parent) for parent in ancestors(normalized)
        ) or self.is_ignored(normalized)

    def filter_paths(
        self, candidates: Iterable[PathLike], *, prune: bool = True
    ) -> FilteredPaths:
        """
        Splits candidate paths into kept and removed.

        With `prune` a path is also removed when one of its parent
        directories is ignored, which is what a walk that does not descend
        into ignored directories ends up with. Without it every path is
        judged on its own, so `/meta/info` survives the built-in `/meta`.
        """
        test = self._is_pruned if prune else self.is_ignored
        removed, kept = partition(candidates, test)
        logger.verbose(
            f"Ignore patterns removed {len(removed)} of {len(removed) + len(kept)} paths"
        )
        return FilteredPaths(tuple(kept), tuple(removed))
