"""View modules for manual routing.

The app uses the custom router in `app.py` instead of Streamlit's automatic
multi-page system. Every page lives under `views/` and exposes a `view()`
function; a page may also expose a hook (e.g. `schools.reset`) that the router
runs when the page becomes active.

Add any new page as a module with a `view()` callable and register it in
`PAGE_REGISTRY` inside `app.py`.
"""
