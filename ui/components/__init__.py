"""
Reusable UI components for the school directory.

- `base`: CSS injection, status banners, field errors and image markup.
- `cards`: the per-school card used by the directory grid.
- `school_form`: the create-school input fields.

Import from here (`from ui.components import school_card`) rather than from
the submodules.
"""

from .base import (
    inject_base_css,
    status_message,
    field_error,
    image_html,
)

from .cards import (
    school_card,
)

from . import school_form
