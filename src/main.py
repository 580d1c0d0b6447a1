import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.dependencies import ownership_engine
from src.api.ownership import router as codeowners_api_router
from src.core.config import config
from src.core.utils.logging import configure_logging

logger = structlog.get_logger()

# --- Application Setup ---

configure_logging(
    level=config.logging.level,
    fmt=config.logging.format,
    file_path=config.logging.file_path,
)

app = FastAPI(
    title="Codeowners Search",
    description="Code ownership lookup and owner-scoped search filters.",
    version="0.1.0",
    debug=config.debug,
)

# --- CORS Configuration ---

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.methods,
    allow_headers=config.cors.headers,
)

# --- Include Routers ---

app.include_router(codeowners_api_router, prefix="/api/v1", tags=["Public API"])

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {
        "status": "ok",
        "message": "Codeowners search is running.",
        "has_rule_file": ownership_engine.has_rule_file(),
    }


# --- Application Lifecycle ---


@app.on_event("startup")
async def startup_event():
    """Load the CODEOWNERS file of the configured workspace."""
    config.validate()

    found = ownership_engine.reload(config.workspace.roots, config.workspace.rule_file_locations)
    if found:
        logger.info(
            "codeowners_ready",
            path=ownership_engine.rule_file_path(),
            owners=len(ownership_engine.all_owners()),
        )
    else:
        logger.warning("codeowners_missing", roots=config.workspace.roots)
