"""
Ownership resolution over a parsed CODEOWNERS file.

The engine answers two queries against the current rule snapshot:
who owns a given path (last matching rule wins), and which patterns
characterize all files of a given owner. The snapshot is immutable and is
swapped in a single assignment on reload, so a query always sees either the
previous or the new rule file in full.
"""

from collections.abc import Sequence

import structlog

from src.codeowners.loader import RULE_FILE_LOCATIONS, load_rule_file
from src.codeowners.matcher import matches
from src.codeowners.models import (
    MATCH_EVERYTHING,
    OWNED_BY_ALL,
    UNOWNED,
    OwnerPatterns,
    OwnershipInfo,
    Rule,
    RuleSnapshot,
)
from src.codeowners.overrides import would_override
from src.codeowners.parser import build_snapshot
from src.codeowners.paths import relative_to_workspace
from src.core.utils.logging import log_operation

logger = structlog.get_logger()


def _unique(patterns: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(patterns))


class OwnershipEngine:
    """Resolves file ownership and owner pattern sets from CODEOWNERS rules."""

    def __init__(self, snapshot: RuleSnapshot | None = None):
        self._snapshot = snapshot or RuleSnapshot()

    @classmethod
    def from_text(
        cls,
        content: str,
        source: str | None = None,
        workspace_roots: Sequence[str] = (),
    ) -> "OwnershipEngine":
        """Build an engine directly from rule-file text."""
        return cls(build_snapshot(content, source=source, workspace_roots=workspace_roots))

    # --- Lifecycle ---

    @property
    def snapshot(self) -> RuleSnapshot:
        return self._snapshot

    def load(
        self,
        content: str | None,
        source: str | None = None,
        workspace_roots: Sequence[str] = (),
    ) -> RuleSnapshot:
        """
        Parse rule-file text and install it as the current snapshot.

        Args:
            content: Raw text of the rule file, or None when no file was found
            source: Location the text was read from
            workspace_roots: Workspace roots used to relativize absolute paths

        Returns:
            The newly installed snapshot
        """
        snapshot = build_snapshot(content, source=source, workspace_roots=workspace_roots)
        self._snapshot = snapshot
        return snapshot

    def clear(self) -> None:
        """Forget the current rule file."""
        self._snapshot = RuleSnapshot(workspace_roots=self._snapshot.workspace_roots)

    def reload(
        self,
        workspace_roots: Sequence[str],
        locations: Sequence[str] = RULE_FILE_LOCATIONS,
    ) -> bool:
        """
        Locate the rule file in the workspace and replace the current snapshot.

        Args:
            workspace_roots: Workspace root directories
            locations: Candidate rule-file locations relative to each root

        Returns:
            True if a rule file was found and loaded
        """
        roots = [str(root) for root in workspace_roots]
        with log_operation("codeowners_reload", roots=roots) as result:
            rule_file = load_rule_file(roots, locations)
            if rule_file is None:
                snapshot = self.load(None, workspace_roots=roots)
            else:
                snapshot = self.load(rule_file.content, source=str(rule_file.path), workspace_roots=roots)
            result["found"] = snapshot.has_rule_file
            result["rule_count"] = len(snapshot.rules)
        return snapshot.has_rule_file

    # --- Catalog ---

    def has_rule_file(self) -> bool:
        return self._snapshot.has_rule_file

    def rule_file_path(self) -> str | None:
        return self._snapshot.source

    def rules(self) -> list[Rule]:
        return list(self._snapshot.rules)

    def all_owners(self) -> list[str]:
        """Every owner mentioned in the rule file, sorted."""
        return list(self._snapshot.owners)

    # --- Single file resolution ---

    def resolve(self, path: str) -> OwnershipInfo:
        """
        Get the owners of a single file.

        Args:
            path: File path, absolute or relative to a workspace root

        Returns:
            OwnershipInfo of the last rule matching the path, or an unowned
            result when there is no rule file or nothing matches
        """
        snapshot = self._snapshot
        if not snapshot.has_rule_file or not snapshot.rules:
            return OwnershipInfo()

        relative_path = relative_to_workspace(path, snapshot.workspace_roots)
        if relative_path is None:
            logger.debug("path_outside_workspace", path=path)
            return OwnershipInfo()

        # Later rules take precedence: keep the most recent match
        last_match: Rule | None = None
        for rule in snapshot.rules:
            if matches(relative_path, rule.pattern):
                last_match = rule

        if last_match is None:
            return OwnershipInfo()

        return OwnershipInfo(
            owners=list(last_match.owners),
            is_unowned=last_match.is_unowned,
            matching_pattern=last_match.pattern,
        )

    # --- Owner pattern sets ---

    def patterns_for_owner(self, owner: str) -> OwnerPatterns:
        """
        Get the include/exclude CODEOWNERS patterns covering an owner's files.

        Args:
            owner: Owner token, or one of the synthetic owners "unowned" and
                "owned-by-all"

        Returns:
            OwnerPatterns; empty include patterns mean the owner has no files
        """
        snapshot = self._snapshot
        if owner == UNOWNED:
            return self._patterns_for_unowned(snapshot)
        if owner == OWNED_BY_ALL:
            return self._patterns_for_all_owned(snapshot)
        return self._patterns_for_specific_owner(snapshot, owner)

    @staticmethod
    def _owned_patterns(snapshot: RuleSnapshot) -> list[str]:
        return _unique([rule.pattern for rule in snapshot.rules if not rule.is_unowned])

    @staticmethod
    def _unowned_patterns(snapshot: RuleSnapshot) -> list[str]:
        return _unique([rule.pattern for rule in snapshot.rules if rule.is_unowned])

    def _patterns_for_unowned(self, snapshot: RuleSnapshot) -> OwnerPatterns:
        unowned = self._unowned_patterns(snapshot)
        if unowned:
            return OwnerPatterns(include_patterns=unowned)
        # Everything that no rule claims
        return OwnerPatterns(
            include_patterns=[MATCH_EVERYTHING],
            exclude_patterns=self._owned_patterns(snapshot),
        )

    def _patterns_for_all_owned(self, snapshot: RuleSnapshot) -> OwnerPatterns:
        owned = self._owned_patterns(snapshot)
        return OwnerPatterns(
            include_patterns=owned or [MATCH_EVERYTHING],
            exclude_patterns=self._unowned_patterns(snapshot),
        )

    @staticmethod
    def _patterns_for_specific_owner(snapshot: RuleSnapshot, owner: str) -> OwnerPatterns:
        rules = snapshot.rules
        owner_indices = [index for index, rule in enumerate(rules) if owner in rule.owners]

        include = _unique([rules[index].pattern for index in owner_indices])
        if not include:
            return OwnerPatterns()

        # Later rules that take over this owner's files for someone else
        candidates: list[str] = []
        for index in owner_indices:
            earlier = rules[index]
            for later in rules[index + 1 :]:
                if owner not in later.owners and would_override(earlier.pattern, later.pattern):
                    candidates.append(later.pattern)

        # A pattern cannot be both included and excluded for the same owner
        included = set(include)
        exclude = [pattern for pattern in _unique(candidates) if pattern not in included]

        return OwnerPatterns(include_patterns=include, exclude_patterns=exclude)
