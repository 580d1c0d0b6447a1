"""Code ownership query endpoints."""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.dependencies import get_ownership_engine
from src.api.errors import ErrorResponse, not_found
from src.codeowners.engine import OwnershipEngine
from src.codeowners.globs import render_exclude_globs, render_include_globs
from src.codeowners.models import OwnershipInfo
from src.core.config import config
from src.core.utils.logging import log_structured
from src.search.filters import build_search_filters

logger = structlog.get_logger()

router = APIRouter(prefix="/codeowners", tags=["Code Owners"])


class OwnersResponse(BaseModel):
    owners: list[str] = Field(default_factory=list)
    has_rule_file: bool = False
    rule_file_path: str | None = None


class OwnerPatternsResponse(BaseModel):
    owner: str
    include_patterns: list[str] = Field(default_factory=list)
    exclude_patterns: list[str] = Field(default_factory=list)
    include_globs: list[str] = Field(default_factory=list)
    exclude_globs: list[str] = Field(default_factory=list)


class SearchFiltersResponse(BaseModel):
    owner: str
    query: str = ""
    files_to_include: str
    files_to_exclude: str
    message: str


class ReloadRequest(BaseModel):
    workspace_roots: list[str] | None = None  # Defaults to the configured roots


class ReloadResponse(BaseModel):
    reloaded: bool
    rule_file_path: str | None = None
    rule_count: int = 0
    owner_count: int = 0


@router.get("/owners", response_model=OwnersResponse, summary="List code owners")
async def list_owners(engine: OwnershipEngine = Depends(get_ownership_engine)) -> OwnersResponse:
    """All owners mentioned in the CODEOWNERS file, sorted."""
    return OwnersResponse(
        owners=engine.all_owners(),
        has_rule_file=engine.has_rule_file(),
        rule_file_path=engine.rule_file_path(),
    )


@router.get("/resolve", response_model=OwnershipInfo, summary="Resolve the owners of a file")
async def resolve_owner(
    path: str = Query(..., min_length=1, description="File path, absolute or workspace-relative"),
    engine: OwnershipEngine = Depends(get_ownership_engine),
) -> OwnershipInfo:
    return engine.resolve(path)


@router.get("/patterns", response_model=OwnerPatternsResponse, summary="Patterns covering an owner's files")
async def owner_patterns(
    owner: str = Query(..., min_length=1, description='Owner token, "unowned" or "owned-by-all"'),
    engine: OwnershipEngine = Depends(get_ownership_engine),
) -> OwnerPatternsResponse:
    patterns = engine.patterns_for_owner(owner)
    return OwnerPatternsResponse(
        owner=owner,
        include_patterns=patterns.include_patterns,
        exclude_patterns=patterns.exclude_patterns,
        include_globs=render_include_globs(patterns.include_patterns),
        exclude_globs=render_exclude_globs(patterns.exclude_patterns),
    )


@router.get(
    "/search-filters",
    response_model=SearchFiltersResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    summary="Find-in-files filters for an owner",
)
async def search_filters(
    owner: str = Query(..., min_length=1),
    query: str = Query(""),
    exclude: list[str] | None = Query(None, description="Additional exclude globs"),
    engine: OwnershipEngine = Depends(get_ownership_engine),
) -> Any:
    if not engine.has_rule_file():
        return not_found("rule_file_not_found", "No CODEOWNERS file found in workspace")

    filters = build_search_filters(engine, owner, query=query, extra_excludes=exclude or ())
    if filters is None:
        return not_found("no_files_for_owner", f"No files found for code owner: {owner}", {"owner": owner})

    log_structured(logger, "search_filters_built", owner=owner, include=filters.files_to_include)
    return SearchFiltersResponse(
        owner=owner,
        query=filters.query,
        files_to_include=filters.files_to_include,
        files_to_exclude=filters.files_to_exclude,
        message=filters.summary(),
    )


@router.post("/reload", response_model=ReloadResponse, summary="Reload the CODEOWNERS file")
async def reload_rules(
    request: ReloadRequest | None = None,
    engine: OwnershipEngine = Depends(get_ownership_engine),
) -> ReloadResponse:
    roots = request.workspace_roots if request and request.workspace_roots else config.workspace.roots
    reloaded = engine.reload(roots, config.workspace.rule_file_locations)
    if not reloaded:
        logger.warning("codeowners_reload_no_file", roots=roots)

    return ReloadResponse(
        reloaded=reloaded,
        rule_file_path=engine.rule_file_path(),
        rule_count=len(engine.rules()),
        owner_count=len(engine.all_owners()),
    )
