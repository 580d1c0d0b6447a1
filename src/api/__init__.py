# API endpoints package

from src.api.ownership import router

__all__ = [
    "router",
]
