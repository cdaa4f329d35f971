"""
Streamlit session helpers and authentication UI components.
"""

from typing import Dict, Iterable

import streamlit as st

from ..client import AssetsManagerClient
from ..config import get_settings
from ..services.error_handler import Notification, NotificationLevel
from ..utils.validation_utils import PASSWORD_HELP
from .controllers import ActionResult, AuthController, ViewContext

CONTEXT_KEY = "view_context"


def get_view_context() -> ViewContext:
    """The ``ViewContext`` held in session state, created on first use."""
    if CONTEXT_KEY not in st.session_state:
        settings = get_settings()
        st.session_state[CONTEXT_KEY] = ViewContext(client=AssetsManagerClient(settings=settings))
    return st.session_state[CONTEXT_KEY]


def show_notifications(notifications: Iterable[Notification]) -> None:
    for notification in notifications:
        if notification.level == NotificationLevel.SUCCESS:
            st.success(notification.message)
        elif notification.level == NotificationLevel.WARNING:
            st.warning(notification.message)
        elif notification.level == NotificationLevel.ERROR:
            suffix = f" (ref {notification.error_id})" if notification.error_id else ""
            st.error(notification.message + suffix)
        else:
            st.info(notification.message)


def show_field_error(errors: Dict[str, Notification], name: str) -> None:
    """Render the inline error for one form field, if any."""
    notification = errors.get(name)
    if notification:
        st.caption(f":red[{notification.message}]")


def show_result(result: ActionResult) -> None:
    show_notifications(result.notifications)
    if result.requires_sign_in:
        st.rerun()


def require_sign_in() -> ViewContext:
    """Return the signed-in context, or tell the user to sign in and stop."""
    context = get_view_context()
    if not context.is_signed_in:
        st.warning("Please sign in from the home page to continue.")
        st.stop()
    return context


class AuthComponents:
    """Authentication-related UI components."""

    @staticmethod
    def login_form(context: ViewContext) -> None:
        with st.form("login_form"):
            st.subheader("🔐 Sign In")
            email = st.text_input("Email", placeholder="user@example.com")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign In", type="primary")

        if submitted:
            if not email or not password:
                st.error("Please enter both email and password")
                return
            result = AuthController(context).sign_in(email, password)
            show_notifications(result.notifications)
            for notification in result.field_errors.values():
                st.error(notification.message)
            if result.ok:
                st.rerun()

    @staticmethod
    def register_form(context: ViewContext) -> None:
        with st.form("register_form"):
            st.subheader("📝 Create Account")
            name = st.text_input("Name")
            username = st.text_input("Username")
            email = st.text_input("Email", placeholder="user@example.com", key="reg_email")
            password = st.text_input(
                "Password",
                type="password",
                key="reg_password",
                help=PASSWORD_HELP,
            )
            confirm_password = st.text_input("Confirm Password", type="password")
            submitted = st.form_submit_button("Create Account", type="primary")

        if password:
            strength = AuthController.password_strength(password)
            st.progress(strength.score / 5, text=f"Password strength: {strength.label}")

        if submitted:
            if password != confirm_password:
                st.error("Passwords do not match")
                return
            result = AuthController(context).sign_up(email, password, name, username)
            show_notifications(result.notifications)
            for notification in result.field_errors.values():
                st.error(notification.message)

    @staticmethod
    def logout_button(context: ViewContext) -> None:
        if st.button("🚪 Sign Out", use_container_width=True):
            AuthController(context).sign_out()
            st.rerun()
