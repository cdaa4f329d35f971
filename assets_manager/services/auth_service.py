"""
Authentication service: sign up, sign in, bearer sessions and sign out.
"""

import sqlite3
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from ..config.settings import Settings
from ..exceptions import AuthError, ConflictError
from ..models.user import AuthSession, SignInRequest, SignUpRequest, UserAccount, UserProfile
from ..repositories.user_repository import ProfileRepository, SessionRepository, UserRepository
from ..utils.structured_logging import get_logger

logger = get_logger(__name__)

SESSION_SALT = "assets-manager-session"


class AuthService:
    """Service layer for authentication.

    Tokens are ``itsdangerous`` signed payloads carrying the user id and a
    server-side session id. A token is accepted only while its signature is
    fresh and its session row still exists.
    """

    def __init__(
        self,
        users: UserRepository,
        profiles: ProfileRepository,
        sessions: SessionRepository,
        settings: Settings,
    ):
        self.users = users
        self.profiles = profiles
        self.sessions = sessions
        self.settings = settings
        self.serializer = URLSafeTimedSerializer(settings.security.secret_key, salt=SESSION_SALT)

    @property
    def session_timeout(self) -> timedelta:
        return timedelta(minutes=self.settings.security.session_timeout_minutes)

    def sign_up(self, request: SignUpRequest) -> Tuple[UserAccount, UserProfile]:
        """Create an account and its profile."""
        if self.users.find_by_email(request.email):
            raise ConflictError("An account with this email already exists", field="email")
        if self.profiles.find_by_username(request.username):
            raise ConflictError("Username already taken", field="username")

        account = UserAccount.create(
            request.email, request.password, rounds=self.settings.security.bcrypt_rounds
        )
        account.id = str(uuid.uuid4())
        profile = UserProfile(user_id=account.id, name=request.name, username=request.username)
        try:
            self.users.add(account)
            self.profiles.add(profile)
        except sqlite3.IntegrityError as e:
            self.users.delete(account.id)
            raise ConflictError("Email or username already taken") from e

        logger.info("User signed up", user_id=account.id, operation="sign_up")
        return account, profile

    def sign_in(self, request: SignInRequest) -> AuthSession:
        """Verify credentials and open a session."""
        account = self.users.find_by_email(request.email)
        if not account or not account.verify_password(request.password):
            logger.warning("Sign in failed", operation="sign_in")
            raise AuthError("Invalid email or password")

        now = datetime.now(timezone.utc)
        session_id = str(uuid.uuid4())
        expires_at = now + self.session_timeout
        self.sessions.add(session_id, account.id, now, expires_at)
        token = self.serializer.dumps({"sid": session_id, "uid": account.id})

        logger.info("User signed in", user_id=account.id, operation="sign_in")
        return AuthSession(access_token=token, user_id=account.id, expires_at=expires_at)

    def _decode(self, token: str) -> dict:
        try:
            payload = self.serializer.loads(
                token, max_age=int(self.session_timeout.total_seconds())
            )
        except SignatureExpired:
            raise AuthError("Session expired")
        except BadSignature:
            raise AuthError("Invalid token")
        if not isinstance(payload, dict) or "sid" not in payload or "uid" not in payload:
            raise AuthError("Invalid token")
        return payload

    def authenticate(self, token: Optional[str]) -> UserAccount:
        """Resolve a bearer token to its account or raise ``AuthError``."""
        if not token:
            raise AuthError("No authorization header")
        payload = self._decode(token)

        session = self.sessions.find(payload["sid"])
        if not session or session["user_id"] != payload["uid"]:
            raise AuthError("Session has been signed out")
        if session["expires_at"] <= datetime.now(timezone.utc):
            self.sessions.delete(payload["sid"])
            raise AuthError("Session expired")

        account = self.users.find_by_id(payload["uid"])
        if not account:
            raise AuthError("Account no longer exists")
        return account

    def sign_out(self, token: Optional[str]) -> None:
        """Revoke the session behind a token."""
        if not token:
            raise AuthError("No authorization header")
        payload = self._decode(token)
        self.sessions.delete(payload["sid"])
        logger.info("User signed out", user_id=payload["uid"], operation="sign_out")
