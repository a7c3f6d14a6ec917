"""
FastAPI dependencies - get_subjects_repository, get_bearer_token.
"""

from typing import Optional
from fastapi import Request

from .config import logger
from .database import SubjectsRepository, InMemorySubjectsRepository


def get_subjects_repository(request: Request) -> SubjectsRepository:
    """Repository attached to the running app (created on first use if lifespan did not run)"""
    repository = getattr(request.app.state, "subjects_repository", None)
    if repository is None:
        repository = InMemorySubjectsRepository()
        request.app.state.subjects_repository = repository
    return repository


async def get_bearer_token(request: Request) -> Optional[str]:
    """Read the bearer token if present. Endpoints are open, so nothing is rejected."""
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        token = auth_header.split(" ", 1)[1].strip()
        if token:
            return token
    logger.debug("Request without bearer token: %s %s", request.method, request.url.path)
    return None
