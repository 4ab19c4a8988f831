import html
from typing import Optional

import streamlit as st

from domain.constants import FALLBACK_IMAGE_URL

PRIMARY_ACCENT = "#2563EB"  # blue-600
GREEN = "#059669"  # emerald-600
RED = "#DC2626"  # red-600
GRAY_BORDER = "#e0e0e0"


def inject_base_css():
    """Emit the stylesheet; `app.main` calls this on every run."""
    st.markdown(
        f"""
        <style>
        .school-image img {{width:100%; height:180px; object-fit:cover; border-radius:8px;}}
        .school-name {{font-size:1.1rem; font-weight:600; margin:8px 0 2px;}}
        .school-address {{color:#555; font-size:.85rem; margin:0 0 4px;}}
        .school-location {{font-size:.85rem; margin:0 0 4px;}}
        .contact-info p {{font-size:.8rem; margin:0;}}
        .error-message {{color:{RED}; font-size:.8rem;}}
        .message {{padding:8px 12px; border-radius:8px; margin-bottom:8px; font-weight:600;}}
        .message.success {{background:#ecfdf5; color:{GREEN}; border:1px solid {GREEN};}}
        .message.error {{background:#fef2f2; color:{RED}; border:1px solid {RED};}}
        .image-preview img {{max-width:320px; border:1px solid {GRAY_BORDER}; border-radius:8px;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def status_message(text: str, ok: bool):
    """Transient status banner for form submissions."""
    cls = "success" if ok else "error"
    st.markdown(f'<div class="message {cls}">{html.escape(text)}</div>', unsafe_allow_html=True)


def field_error(message: Optional[str]):
    if message:
        st.markdown(f'<span class="error-message">{html.escape(message)}</span>', unsafe_allow_html=True)


def image_html(src: Optional[str], alt: str, css_class: str = "school-image") -> str:
    """<img> markup that swaps to the fallback image if the browser cannot load ``src``."""
    safe_src = html.escape(src or FALLBACK_IMAGE_URL, quote=True)
    fallback = html.escape(FALLBACK_IMAGE_URL, quote=True)
    return (
        f'<div class="{css_class}"><img src="{safe_src}" alt="{html.escape(alt, quote=True)}" '
        f'onerror="this.onerror=null;this.src=\'{fallback}\';"/></div>'
    )
