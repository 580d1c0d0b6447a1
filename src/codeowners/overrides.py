"""
Override detection between CODEOWNERS rules.

`would_override` is a small set of directional heuristics, not a full
specificity ordering. Pattern shapes it does not cover (for example two
sibling directories) are reported as no override.
"""

import re

from src.core.utils.patterns import has_wildcard

_WILDCARD_TAIL = re.compile(r"/?[*?].*$")


def base_directory(pattern: str) -> str:
    """Strip the first wildcard and everything after it, with its leading slash.

    Examples:
        "/src/components/*.ts" -> "/src/components"
        "*.js" -> ""
    """
    return _WILDCARD_TAIL.sub("", pattern, count=1)


def would_override(earlier: str, later: str) -> bool:
    """
    Check if a later pattern takes over files matched by an earlier one.

    Args:
        earlier: Pattern of the rule that appears first in the file
        later: Pattern of a rule that appears after it

    Returns:
        True if the later pattern reassigns some of the earlier pattern's files
    """
    if earlier == later:
        return True

    if earlier.startswith("*.") and "/" in later:
        extension = earlier[1:]
        # e.g. "/api/*.js" over "*.js"
        if later.endswith(extension):
            return True
        # e.g. "/src/extension.ts" over "*.ts"
        if not has_wildcard(later):
            return later.endswith(extension)

    # e.g. "/src/components/*.ts" over "/src/*.ts"
    if "/" in earlier and "/" in later:
        earlier_base = base_directory(earlier)
        later_base = base_directory(later)
        if later_base.startswith(earlier_base) and len(later_base) > len(earlier_base):
            return True

    return False
