import html
from typing import Callable

import streamlit as st

from domain.constants import MSG_EDIT_UNSUPPORTED
from domain.models import SchoolRecord
from .base import image_html


def school_card(school: SchoolRecord, on_view: Callable[[SchoolRecord], None],
                on_delete: Callable[[SchoolRecord], None], position: int = 0):
    """
    Displays one school with its image, contact block and the three actions.

    ``on_view`` / ``on_delete`` are called during the script run in which the
    matching button was pressed, so they may open dialogs.
    """
    # ids may be missing or repeated in a response; the grid position keeps keys unique
    key = f"school_{position}_{school.id}"
    with st.container(border=True):
        st.markdown(image_html(school.image, school.name), unsafe_allow_html=True)
        st.markdown(
            f"""
            <div class="school-info">
                <p class="school-name">{html.escape(school.name)}</p>
                <p class="school-address">{html.escape(school.address)}</p>
                <p class="school-location">{html.escape(school.city)}, {html.escape(school.state)}</p>
                <div class="contact-info">
                    <p class="contact">📞 {html.escape(school.contact)}</p>
                    <p class="email">✉️ {html.escape(school.email_id)}</p>
                </div>
            </div>
            """,
            unsafe_allow_html=True
        )
        c1, c2, c3 = st.columns(3)
        if c1.button("View Details", key=f"{key}_view"):
            on_view(school)
        c2.button("Edit", key=f"{key}_edit", disabled=True, help=MSG_EDIT_UNSUPPORTED)
        if c3.button("Delete", key=f"{key}_delete", type="primary"):
            on_delete(school)
