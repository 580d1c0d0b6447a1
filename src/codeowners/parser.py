"""
Parsing of CODEOWNERS rule files.

Turns raw rule-file text into an ordered list of rules and the catalog of
every owner the file mentions. Parsing never fails: malformed entries are
dropped or degraded to owner-less rules.
"""

import re
from collections.abc import Iterable, Sequence

import structlog

from src.codeowners.models import Rule, RuleSnapshot

logger = structlog.get_logger()

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _is_owner_token(token: str) -> bool:
    return "@" in token


def parse_rules(content: str) -> list[Rule]:
    """
    Parse CODEOWNERS content into an ordered list of rules.

    Args:
        content: Raw text of the rule file

    Returns:
        Rules in file order. A pattern without owner tokens yields a rule with
        no owners, which marks matching paths as explicitly unowned.
    """
    rules: list[Rule] = []

    for line_num, raw_line in enumerate(_LINE_BREAK.split(content), 1):
        line = raw_line.strip()

        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue

        # First token is the pattern, the rest are candidate owners
        pattern, *candidates = line.split()

        owners = [token for token in candidates if _is_owner_token(token)]
        dropped = [token for token in candidates if not _is_owner_token(token)]
        if dropped:
            logger.debug("codeowners_tokens_dropped", line=line_num, tokens=dropped)

        rules.append(Rule(pattern=pattern, owners=tuple(dict.fromkeys(owners)), line=line_num))

    return rules


def collect_owners(rules: Iterable[Rule]) -> list[str]:
    """
    Build the sorted, deduplicated owner catalog for a rule list.

    Args:
        rules: Parsed rules

    Returns:
        Every owner token that appears in any rule, sorted
    """
    owners: set[str] = set()
    for rule in rules:
        owners.update(rule.owners)
    return sorted(owners)


def build_snapshot(
    content: str | None,
    source: str | None = None,
    workspace_roots: Sequence[str] = (),
) -> RuleSnapshot:
    """
    Parse rule-file text into a complete, immutable snapshot.

    Args:
        content: Raw text of the rule file, or None when no file was found
        source: Location the text was read from
        workspace_roots: Workspace roots paths are resolved against

    Returns:
        A RuleSnapshot. When content is None the snapshot reports no rule file.
    """
    if content is None:
        return RuleSnapshot(workspace_roots=tuple(workspace_roots))

    rules = parse_rules(content)
    return RuleSnapshot(
        rules=tuple(rules),
        owners=tuple(collect_owners(rules)),
        source=source if source is not None else "<memory>",
        workspace_roots=tuple(workspace_roots),
    )
