__VERSION__ = "0.1.0"

from capstanignore.error import CapstanignoreError
from capstanignore.error import NotCompiledError
from capstanignore.error import PatternError
from capstanignore.matcher import FilteredPaths
from capstanignore.matcher import IgnoreMatcher
from capstanignore.pattern_set import initialize
from capstanignore.pattern_set import PatternSet
from capstanignore.translate import CompiledPattern

__all__ = [
    "CapstanignoreError",
    "CompiledPattern",
    "FilteredPaths",
    "IgnoreMatcher",
    "NotCompiledError",
    "PatternError",
    "PatternSet",
    "initialize",
]
