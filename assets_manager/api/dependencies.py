"""
FastAPI dependencies: container lookup and bearer authentication.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..container import Container
from ..models.user import UserAccount
from ..services.auth_service import AuthService
from ..services.entry_service import EntryService
from ..services.profile_service import ProfileService

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_auth_service(container: Container = Depends(get_container)) -> AuthService:
    return container.get_auth_service()


def get_entry_service(container: Container = Depends(get_container)) -> EntryService:
    return container.get_entry_service()


def get_profile_service(container: Container = Depends(get_container)) -> ProfileService:
    return container.get_profile_service()


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserAccount:
    """Resolve the caller; the user id is never taken from request bodies."""
    return auth_service.authenticate(token)
