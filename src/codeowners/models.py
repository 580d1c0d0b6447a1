from pydantic import BaseModel, ConfigDict, Field

UNOWNED = "unowned"
OWNED_BY_ALL = "owned-by-all"

MATCH_EVERYTHING = "**/*"


class Rule(BaseModel):
    """A single CODEOWNERS line: a pattern and the owners it assigns."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    owners: tuple[str, ...] = ()
    line: int = 0  # 1-based line in the source file, 0 when unknown

    @property
    def is_unowned(self) -> bool:
        """True when the rule explicitly marks matching paths as unowned."""
        return len(self.owners) == 0


class RuleSnapshot(BaseModel):
    """Immutable view of a parsed rule file. Replaced wholesale on reload."""

    model_config = ConfigDict(frozen=True)

    rules: tuple[Rule, ...] = ()
    owners: tuple[str, ...] = ()  # sorted owner catalog
    source: str | None = None  # path of the located rule file
    workspace_roots: tuple[str, ...] = ()

    @property
    def has_rule_file(self) -> bool:
        return self.source is not None


class OwnershipInfo(BaseModel):
    """Ownership of a single file."""

    owners: list[str] = Field(default_factory=list)
    is_unowned: bool = True
    matching_pattern: str | None = None


class OwnerPatterns(BaseModel):
    """CODEOWNERS patterns that characterize all files of one owner."""

    include_patterns: list[str] = Field(default_factory=list)
    exclude_patterns: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.include_patterns
