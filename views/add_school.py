import html
from dataclasses import dataclass, field
from typing import Dict

import streamlit as st

from domain.models import image_from_upload
from services.preview import ImagePreview
from services.schools_api import SchoolsApi
from services.submission import submit_school
from ui.components import school_form, status_message

STATE_KEY = 'add_school_form'


@dataclass
class FormState:
    submitting: bool = False
    clear_pending: bool = False
    message: str = ''
    ok: bool = False
    errors: Dict[str, str] = field(default_factory=dict)
    uploader_nonce: int = 0
    preview: ImagePreview = field(default_factory=ImagePreview)

    @property
    def uploader_key(self) -> str:
        return f"school_image_{self.uploader_nonce}"


def _form_state() -> FormState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = FormState()
    return st.session_state[STATE_KEY]


def _request_submit():
    state = _form_state()
    if not state.submitting:
        state.submitting = True
        state.message = ''


def _clear_inputs(state: FormState):
    # Widget values can only be reset before the widgets are created in this run.
    for f in school_form.INPUT_FIELDS:
        st.session_state[school_form.widget_key(f)] = ''
    state.uploader_nonce += 1
    state.preview.release()
    state.clear_pending = False


def view():
    st.header("Add New School")
    state = _form_state()

    if state.clear_pending:
        _clear_inputs(state)

    if state.message:
        status_message(state.message, state.ok)

    upload = school_form.render(state.errors, state.uploader_key)
    image = image_from_upload(upload)

    preview_url = state.preview.update(image)
    if preview_url:
        st.markdown(
            f'<div class="image-preview"><img src="{html.escape(preview_url, quote=True)}" alt="School preview"/></div>',
            unsafe_allow_html=True,
        )

    label = "Adding School..." if state.submitting else "Add School"
    st.button(label, type="primary", disabled=state.submitting, on_click=_request_submit)

    if state.submitting:
        values = {f: st.session_state.get(school_form.widget_key(f), '') for f in school_form.INPUT_FIELDS}
        try:
            with st.spinner("Adding School..."):
                result = submit_school(SchoolsApi.from_settings(), values, image)
        finally:
            state.submitting = False
        state.errors = result.errors
        state.message = result.message
        state.ok = result.ok
        state.clear_pending = result.ok
        st.rerun()
