import re
from re import Pattern

import structlog

logger = structlog.get_logger()

_WILDCARD_CACHE: dict[str, Pattern[str] | None] = {}


def has_wildcard(pattern: str) -> bool:
    """Return True if the pattern carries a `*` or `?` wildcard."""
    return "*" in pattern or "?" in pattern


def wildcard_to_regex(pattern: str) -> str:
    """Translate a CODEOWNERS wildcard pattern into an anchored regex string.

    Literal characters are escaped first, then wildcards are substituted, so the
    synthesized `.*` and `.` tokens are never escaped themselves.

    Args:
        pattern: The wildcard pattern string.

    Returns:
        A regex source string anchored with ``^`` and ``$``.
    """
    escaped: list[str] = []
    for char in pattern:
        if char in "*?":
            escaped.append(char)
        else:
            escaped.append(re.escape(char))

    regex_parts: list[str] = []
    for part in escaped:
        if part == "*":
            regex_parts.append(".*")
        elif part == "?":
            regex_parts.append(".")
        else:
            regex_parts.append(part)

    return "^" + "".join(regex_parts) + "$"


def compile_wildcard(pattern: str) -> Pattern[str] | None:
    """Compile a wildcard pattern, returning None when it is not a valid expression.

    Args:
        pattern: The wildcard pattern string.

    Returns:
        A compiled regex pattern object, or None if compilation failed.
    """
    if pattern in _WILDCARD_CACHE:
        return _WILDCARD_CACHE[pattern]

    regex = wildcard_to_regex(pattern)
    try:
        compiled: Pattern[str] | None = re.compile(regex)
    except re.error as e:
        logger.warning("invalid_wildcard_pattern", pattern=pattern, regex=regex, error=str(e))
        compiled = None

    _WILDCARD_CACHE[pattern] = compiled
    return compiled


def wildcard_match(path: str, pattern: str) -> bool:
    """Check if a normalized path fully matches a wildcard pattern.

    Args:
        path: Workspace-relative, forward-slash separated path.
        pattern: The wildcard pattern string.

    Returns:
        True if the path matches, False otherwise (including invalid patterns).
    """
    compiled = compile_wildcard(pattern)
    if compiled is None:
        return False
    return compiled.match(path) is not None
