"""
Pytest configuration to ensure the project root is on sys.path for imports,
plus shared CODEOWNERS fixtures.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SAMPLE_CODEOWNERS = """\
# Default owners for everything in the repo
*                       @org/core

# Frontend
*.js                    @frontend @org/web
/api/*.js               @backend
docs/                   @docs-team
/src/components/*.ts    @frontend
/src/*.ts               @org/web

# Explicitly unowned
build/
README.md               @docs-team
"""


@pytest.fixture
def sample_codeowners() -> str:
    """A small but representative CODEOWNERS file."""
    return SAMPLE_CODEOWNERS
