import streamlit as st

from assets_manager.config import get_settings
from assets_manager.ui.auth import AuthComponents, get_view_context
from assets_manager.utils.structured_logging import configure_logging

settings = get_settings()
configure_logging(settings.app.log_level, json_output=settings.app.is_production)

st.set_page_config(
    page_title=settings.app.page_title,
    page_icon=settings.app.page_icon,
    layout="wide",
    initial_sidebar_state="expanded",
)


def show_login_form(context):
    """Sign-in and sign-up tabs."""
    st.title(f"{settings.app.page_icon} {settings.app.page_title}")
    sign_in_tab, sign_up_tab = st.tabs(["Sign In", "Sign Up"])
    with sign_in_tab:
        AuthComponents.login_form(context)
    with sign_up_tab:
        AuthComponents.register_form(context)


def main_dashboard(context):
    with st.sidebar:
        st.title("Navigation")
        st.markdown("Use the pages in the sidebar to navigate.")
        st.markdown("---")
        st.write(f"👤 Signed in as: {context.email}")
        AuthComponents.logout_button(context)

    st.title(f"{settings.app.page_icon} {settings.app.page_title}")
    st.markdown("""
    Track your personal assets and investments month by month:

    - **🏠 Dashboard**: Summary cards, charts and this month's particulars
    - **➕ Add Particulars**: Record cash and investments for a month
    - **📊 Statistics**: Category distribution, performance and trends
    - **🔀 Comparison**: Compare any two months side by side
    - **⚙️ Settings**: Update your profile or delete your account
    """)


context = get_view_context()
if not context.is_signed_in:
    show_login_form(context)
else:
    main_dashboard(context)
