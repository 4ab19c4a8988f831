import logging

import streamlit as st
from urllib.parse import unquote

from domain.constants import APP_TITLE, HOME_PATH, ADD_SCHOOL_PATH, SCHOOLS_PATH
from services.config import get_settings, configure_logging
from ui.components import inject_base_css

# Import the page rendering functions from the view modules
from views import home, add_school, schools

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a page key to its label, router path, rendering function and an
# optional hook run when the page becomes active.
PAGE_REGISTRY = {
    "home": {
        "label": "🏫 Home",
        "path": HOME_PATH,
        "render_func": home.view,
        "on_enter": None,
    },
    "add_school": {
        "label": "➕ Add School",
        "path": ADD_SCHOOL_PATH,
        "render_func": add_school.view,
        "on_enter": None,
    },
    "schools": {
        "label": "📋 View Schools",
        "path": SCHOOLS_PATH,
        "render_func": schools.view,
        "on_enter": schools.reset,
    },
}


def page_for_path(path: str):
    """Return the registry key whose path matches ``path`` (home if unknown)."""
    normalized = '/' + (path or '').strip().strip('/')
    for key, page in PAGE_REGISTRY.items():
        if page["path"] == normalized:
            return key
    return "home"


def main():
    """
    Main application router.

    Renders the sidebar navigation, keeps the ``page`` query parameter in sync
    with the selected view, and fires a page's ``on_enter`` hook whenever the
    user navigates onto it.
    """
    settings = get_settings()
    configure_logging(settings)
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    inject_base_css()

    page_keys = list(PAGE_REGISTRY.keys())
    page_labels = [v["label"] for v in PAGE_REGISTRY.values()]

    # Deferred navigation from buttons, or initial path from the URL
    qs = st.query_params
    if 'nav_target' in st.session_state:
        target = st.session_state.nav_target
        if target in PAGE_REGISTRY:
            st.session_state.navigation_radio = PAGE_REGISTRY[target]["label"]
        del st.session_state.nav_target
    elif 'navigation_radio' not in st.session_state:
        raw_param = qs.get('page')
        raw = unquote(raw_param) if isinstance(raw_param, str) else HOME_PATH
        st.session_state.navigation_radio = PAGE_REGISTRY[page_for_path(raw)]["label"]

    # --- Sidebar ---
    st.sidebar.title(APP_TITLE)
    selected_page_label = st.sidebar.radio(
        "Navigation",
        page_labels,
        key="navigation_radio"
    )
    selected_page_key = page_keys[page_labels.index(selected_page_label)]
    st.query_params['page'] = PAGE_REGISTRY[selected_page_key]["path"]

    # --- Mount hook ---
    if st.session_state.get('active_page') != selected_page_key:
        logger.info("Entering page %s", selected_page_key)
        hook = PAGE_REGISTRY[selected_page_key]["on_enter"]
        if hook:
            hook()
        st.session_state.active_page = selected_page_key

    # --- Page Rendering ---
    PAGE_REGISTRY[selected_page_key]["render_func"]()

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(f"API: {settings.api_base_url}")


if __name__ == "__main__":
    main()
