import streamlit as st

from domain.constants import MSG_DELETE_CONFIRM, MSG_DELETE_SUCCESS
from domain.models import SchoolRecord
from services.directory import DirectoryState, load_directory, filter_schools, delete_school, empty_message
from services.export import export_to_csv, schools_dataframe
from services.schools_api import SchoolsApi
from ui.components import school_card

STATE_KEY = 'directory_state'
FLASH_KEY = 'directory_flash'
GRID_COLUMNS = 3


def reset():
    """Forget the loaded list so the next render fetches again (page mount)."""
    st.session_state.pop(STATE_KEY, None)
    st.session_state.pop(FLASH_KEY, None)


def _directory_state() -> DirectoryState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = DirectoryState()
    return st.session_state[STATE_KEY]


def _retry():
    _directory_state().loading = True


@st.dialog("School Details")
def _details_dialog(school: SchoolRecord):
    st.text(school.details_text())
    if st.button("Close"):
        st.rerun()


@st.dialog("Delete School")
def _confirm_delete_dialog(school: SchoolRecord):
    st.write(MSG_DELETE_CONFIRM)
    st.markdown(f"**{school.name}** ({school.city}, {school.state})")
    c1, c2 = st.columns(2)
    if c1.button("Delete", type="primary", key="confirm_delete"):
        state = _directory_state()
        if delete_school(SchoolsApi.from_settings(), state, school.id):
            st.session_state[FLASH_KEY] = MSG_DELETE_SUCCESS
        st.rerun()
    if c2.button("Cancel", key="cancel_delete"):
        st.rerun()


def _render_grid(schools):
    for start in range(0, len(schools), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for offset, (school, col) in enumerate(zip(schools[start:start + GRID_COLUMNS], cols)):
            with col:
                school_card(school, on_view=_details_dialog, on_delete=_confirm_delete_dialog,
                            position=start + offset)


def view():
    state = _directory_state()
    if state.loading:
        with st.spinner("Loading schools..."):
            load_directory(SchoolsApi.from_settings(), state)

    head_l, head_r = st.columns([3, 2])
    head_l.header("Schools Directory")
    search_term = head_r.text_input(
        "Search", key="school_search", label_visibility="collapsed",
        placeholder="Search schools by name, city, or state...")

    flash = st.session_state.pop(FLASH_KEY, None)
    if flash:
        st.toast(flash)

    if state.error:
        st.error(state.error)

    filtered = filter_schools(state.schools, search_term)
    if not filtered:
        st.info(empty_message(state, search_term))
        if state.error:
            st.button("Retry", on_click=_retry)
        return

    if 'schools_view_mode' not in st.session_state:
        st.session_state.schools_view_mode = "Cards"
    view_mode = st.radio("Display", ["Cards", "Table"], horizontal=True, key="schools_view_mode")
    if view_mode == "Table":
        st.dataframe(schools_dataframe(filtered), hide_index=True, use_container_width=True)
    else:
        _render_grid(filtered)

    st.download_button("CSV Download", data=export_to_csv(filtered),
                       file_name="schools.csv", mime="text/csv")
