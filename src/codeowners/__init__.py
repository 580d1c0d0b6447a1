"""
CODEOWNERS ownership resolution.

This package parses CODEOWNERS files, resolves the owners of individual
files, and derives the include/exclude patterns that describe all files of
an owner.
"""

from src.codeowners.engine import OwnershipEngine
from src.codeowners.globs import render_exclude_globs, render_glob, render_include_globs
from src.codeowners.loader import RULE_FILE_LOCATIONS, RuleFile, load_rule_file, locate_rule_file
from src.codeowners.matcher import matches
from src.codeowners.models import (
    OWNED_BY_ALL,
    UNOWNED,
    OwnerPatterns,
    OwnershipInfo,
    Rule,
    RuleSnapshot,
)
from src.codeowners.overrides import would_override
from src.codeowners.parser import build_snapshot, collect_owners, parse_rules

__all__ = [
    "OwnershipEngine",
    "render_exclude_globs",
    "render_glob",
    "render_include_globs",
    "RULE_FILE_LOCATIONS",
    "RuleFile",
    "load_rule_file",
    "locate_rule_file",
    "matches",
    "OWNED_BY_ALL",
    "UNOWNED",
    "OwnerPatterns",
    "OwnershipInfo",
    "Rule",
    "RuleSnapshot",
    "would_override",
    "build_snapshot",
    "collect_owners",
    "parse_rules",
]
