import streamlit as st


def _go(page_key: str):
    st.session_state.nav_target = page_key


def view():
    st.title("Welcome to School Management System")
    c1, c2 = st.columns(2)
    c1.button("Add New School", type="primary", on_click=_go, args=("add_school",),
              use_container_width=True)
    c2.button("View All Schools", on_click=_go, args=("schools",),
              use_container_width=True)
