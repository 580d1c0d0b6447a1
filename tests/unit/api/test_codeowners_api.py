from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from src.api.dependencies import get_ownership_engine
from src.api.ownership import router
from src.codeowners.engine import OwnershipEngine
from src.core.config import config
from src.main import app as main_app

CODEOWNERS = "*.js @frontend\n/api/*.js @backend\ndocs/ @docs\nbuild/\n"


@pytest.fixture
def engine() -> OwnershipEngine:
    return OwnershipEngine.from_text(CODEOWNERS, source="/repo/CODEOWNERS", workspace_roots=["/repo"])


@pytest.fixture
def app(engine: OwnershipEngine) -> FastAPI:
    """Create FastAPI test app with the codeowners router."""
    test_app = FastAPI()
    test_app.include_router(router, prefix="/api/v1")
    test_app.dependency_overrides[get_ownership_engine] = lambda: engine
    return test_app


class TestCodeownersAPI:
    """Test codeowners query endpoints."""

    @pytest.mark.asyncio
    async def test_list_owners(self, app: FastAPI) -> None:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/v1/codeowners/owners")

        assert response.status_code == 200
        assert response.json() == {
            "owners": ["@backend", "@docs", "@frontend"],
            "has_rule_file": True,
            "rule_file_path": "/repo/CODEOWNERS",
        }

    @pytest.mark.asyncio
    async def test_resolve(self, app: FastAPI) -> None:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/v1/codeowners/resolve", params={"path": "/repo/api/server.js"})

        assert response.status_code == 200
        assert response.json() == {"owners": ["@backend"], "is_unowned": False, "matching_pattern": "/api/*.js"}

    @pytest.mark.asyncio
    async def test_resolve_requires_path(self, app: FastAPI) -> None:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/v1/codeowners/resolve")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_patterns(self, app: FastAPI) -> None:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/v1/codeowners/patterns", params={"owner": "@frontend"})

        assert response.status_code == 200
        data = response.json()
        assert data["include_patterns"] == ["*.js"]
        assert data["exclude_patterns"] == ["/api/*.js"]
        assert data["include_globs"] == ["**/*.js"]
        assert data["exclude_globs"] == ["api/*.js"]

    @pytest.mark.asyncio
    async def test_search_filters(self, app: FastAPI) -> None:
        params = {"owner": "@frontend", "query": "fetch(", "exclude": ["**/dist"]}
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/v1/codeowners/search-filters", params=params)

        assert response.status_code == 200
        data = response.json()
        assert data["files_to_include"] == "**/*.js"
        assert data["files_to_exclude"] == "api/*.js,**/dist"
        assert data["query"] == "fetch("
        assert data["message"].startswith('Applied "@frontend" file filters')

    @pytest.mark.asyncio
    async def test_search_filters_owner_without_files(self, app: FastAPI) -> None:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/v1/codeowners/search-filters", params={"owner": "@nobody"})

        assert response.status_code == 404
        data = response.json()
        assert data["error"] is True
        assert data["code"] == "no_files_for_owner"
        assert data["details"] == {"owner": "@nobody"}

    @pytest.mark.asyncio
    async def test_search_filters_without_rule_file(self, app: FastAPI, engine: OwnershipEngine) -> None:
        engine.clear()
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/v1/codeowners/search-filters", params={"owner": "unowned"})

        assert response.status_code == 404
        assert response.json()["code"] == "rule_file_not_found"

    @pytest.mark.asyncio
    async def test_reload(self, app: FastAPI, tmp_path: Path) -> None:
        (tmp_path / "CODEOWNERS").write_text("*.py @python\n", encoding="utf-8")

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post("/api/v1/codeowners/reload", json={"workspace_roots": [str(tmp_path)]})
            owners = await client.get("/api/v1/codeowners/owners")

        assert response.status_code == 200
        assert response.json() == {
            "reloaded": True,
            "rule_file_path": str(tmp_path / "CODEOWNERS"),
            "rule_count": 1,
            "owner_count": 1,
        }
        assert owners.json()["owners"] == ["@python"]

    @pytest.mark.asyncio
    async def test_reload_without_file(self, app: FastAPI, tmp_path: Path) -> None:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post("/api/v1/codeowners/reload", json={"workspace_roots": [str(tmp_path)]})

        assert response.status_code == 200
        assert response.json()["reloaded"] is False
        assert response.json()["rule_file_path"] is None


class TestApplication:
    """Test the assembled application."""

    def test_startup_loads_workspace_rule_file(self, tmp_path: Path) -> None:
        github_dir = tmp_path / ".github"
        github_dir.mkdir()
        (github_dir / "CODEOWNERS").write_text("* @org/core\n", encoding="utf-8")

        with patch.object(config.workspace, "roots", [str(tmp_path)]):
            with TestClient(main_app) as client:
                response = client.get("/")
                owners = client.get("/api/v1/codeowners/owners")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["has_rule_file"] is True
        assert owners.json()["owners"] == ["@org/core"]
