from enum import Enum
from typing import Tuple

PATH_SEP = "/"

# Always ignored, whatever the ignore file says:
# package metadata, package staging area and version control.
BUILTIN_PATTERNS: Tuple[str, ...] = ("/meta", "/mpm-pkg", "/.git")

DEFAULT_IGNORE_FILENAME = ".capstanignore"
COMMENT_PREFIX = "#"

# Characters that can never appear in a path we are asked about
FORBIDDEN_PATTERN_CHARS = frozenset("\x00\n\r")

# glob constructs
DOUBLE_STAR_SEGMENT = "/**/"
TRAILING_STAR_SEGMENT = "/*"
STAR = "*"

# and what they turn into
ANY_CHARS_RE = ".*"
ANY_DESCENDANT_RE = "/.+"
SEGMENT_CHARS_RE = "[^/]*"


class Colors(Enum):
    # these colors come from user's terminal theme
    cyan = "cyan"  # for paths
    gray = "bright_black"  # for built-in patterns
    green = "green"  # for kept paths
    yellow = "yellow"  # for ignored paths
    red = "red"  # for errors
