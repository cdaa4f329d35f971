"""
Authentication and profile clients.
"""

from typing import Any, Dict, Optional

from ..exceptions import ValidationError
from ..models.user import AuthSession, ProfileUpdate, SignInRequest, SignUpRequest, UserProfile
from .store_client import StoreClient, validate_payload


class AuthClient(StoreClient):
    """Client for ``/auth`` endpoints; keeps the bearer token after sign in."""

    def sign_up(self, email: str, password: str, name: str, username: str) -> Dict[str, Any]:
        payload = validate_payload(
            SignUpRequest,
            {"email": email, "password": password, "name": name, "username": username},
        )
        return self._data("POST", "/auth/signup", json=payload.model_dump(), auth=False)

    def sign_in(self, email: str, password: str) -> AuthSession:
        payload = validate_payload(SignInRequest, {"email": email, "password": password})
        data = self._data("POST", "/auth/signin", json=payload.model_dump(), auth=False)
        session = AuthSession.model_validate(data["session"])
        self.token = session.access_token
        return session

    def sign_out(self) -> None:
        """Revoke the session server-side and forget the token."""
        try:
            self._request("POST", "/auth/signout")
        finally:
            self.token = None

    def me(self) -> Dict[str, Any]:
        return self._data("GET", "/auth/me")


class ProfileClient(StoreClient):
    """Client for ``/user`` endpoints."""

    def get_profile(self) -> UserProfile:
        return UserProfile.model_validate(self._data("GET", "/user/profile"))

    def update_profile(self, name: Optional[str] = None, username: Optional[str] = None) -> UserProfile:
        payload = validate_payload(ProfileUpdate, {"name": name, "username": username})
        changes = payload.changes()
        if not changes:
            raise ValidationError("Nothing to update")
        return UserProfile.model_validate(self._data("PUT", "/user/profile", json=changes))

    def delete_account(self) -> None:
        self._request("DELETE", "/user/delete-account")
        self.token = None
