import streamlit as st
from typing import Dict, Any

from domain.constants import FIELD_LABELS, FIELD_PLACEHOLDERS, IMAGE_TYPES
from .base import field_error

INPUT_FIELDS = ("name", "address", "city", "state", "contact", "email_id")


def widget_key(field: str) -> str:
    return f"school_{field}"


def render(errors: Dict[str, str], uploader_key: str) -> Any:
    """
    Renders the create-school inputs with field-scoped error messages.

    Widgets are keyed by ``widget_key`` so the caller can read or clear them
    through session state. The image uploader key changes after every
    successful submission to reset the file selection.

    Returns:
        The uploaded image (Streamlit UploadedFile) or None.
    """
    st.text_input(FIELD_LABELS['name'], key=widget_key('name'),
                  placeholder=FIELD_PLACEHOLDERS['name'])
    field_error(errors.get('name'))

    st.text_area(FIELD_LABELS['address'], key=widget_key('address'),
                 placeholder=FIELD_PLACEHOLDERS['address'], height=90)
    field_error(errors.get('address'))

    c1, c2 = st.columns(2)
    with c1:
        st.text_input(FIELD_LABELS['city'], key=widget_key('city'),
                      placeholder=FIELD_PLACEHOLDERS['city'])
        field_error(errors.get('city'))
    with c2:
        st.text_input(FIELD_LABELS['state'], key=widget_key('state'),
                      placeholder=FIELD_PLACEHOLDERS['state'])
        field_error(errors.get('state'))

    st.text_input(FIELD_LABELS['contact'], key=widget_key('contact'),
                  placeholder=FIELD_PLACEHOLDERS['contact'])
    field_error(errors.get('contact'))

    st.text_input(FIELD_LABELS['email_id'], key=widget_key('email_id'),
                  placeholder=FIELD_PLACEHOLDERS['email_id'])
    field_error(errors.get('email_id'))

    upload = st.file_uploader(FIELD_LABELS['image'], type=IMAGE_TYPES, key=uploader_key)
    field_error(errors.get('image'))
    return upload
