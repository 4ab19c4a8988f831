"""List-view state: loading, searching and deleting school records.

Everything here is independent of Streamlit; the view keeps one
``DirectoryState`` in session state and calls these helpers from its callbacks.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from domain.constants import (
    MSG_DELETE_FAILED, MSG_DELETE_REJECTED, MSG_LIST_FAILED, MSG_LIST_NO_DATA,
    MSG_NO_MATCHES, MSG_NO_SCHOOLS, MSG_UNABLE_TO_LOAD,
)
from domain.models import SchoolId, SchoolRecord
from services.errors import ServerReportedFailure, TransportError
from services.schools_api import SchoolsApi

logger = logging.getLogger(__name__)


@dataclass
class DirectoryState:
    schools: List[SchoolRecord] = field(default_factory=list)
    loading: bool = True
    error: str = ''


def load_directory(api: SchoolsApi, state: DirectoryState) -> DirectoryState:
    """Run the fetch-all request and fold its outcome into ``state``."""
    state.loading = True
    state.error = ''
    try:
        state.schools = api.list_schools()
    except ServerReportedFailure as e:
        logger.warning("List response rejected: %s", e)
        state.schools = []
        state.error = MSG_LIST_NO_DATA
    except TransportError as e:
        logger.error("Error fetching schools: %s", e)
        state.schools = []
        state.error = MSG_LIST_FAILED
    finally:
        state.loading = False
    return state


def matches(school: SchoolRecord, term: str) -> bool:
    needle = term.lower()
    return (needle in school.name.lower()
            or needle in school.city.lower()
            or needle in school.state.lower())


def filter_schools(schools: List[SchoolRecord], term: str) -> List[SchoolRecord]:
    """Case-insensitive substring search over name, city and state."""
    if not term:
        return list(schools)
    return [s for s in schools if matches(s, term)]


def remove_school(schools: List[SchoolRecord], school_id: SchoolId) -> List[SchoolRecord]:
    return [s for s in schools if s.id != school_id]


def delete_school(api: SchoolsApi, state: DirectoryState, school_id: SchoolId) -> bool:
    """
    Delete one school on the server, then drop it locally.

    Returns True when the server confirmed the delete. On any failure the
    local list is left untouched and ``state.error`` carries the banner text.
    """
    try:
        api.delete_school(school_id)
    except ServerReportedFailure as e:
        logger.warning("Delete of school %s rejected: %s", school_id, e)
        state.error = MSG_DELETE_REJECTED
        return False
    except TransportError as e:
        logger.error("Error deleting school %s: %s", school_id, e)
        state.error = MSG_DELETE_FAILED
        return False
    state.schools = remove_school(state.schools, school_id)
    return True


def empty_message(state: DirectoryState, term: str) -> str:
    """Text for an empty grid, depending on search term and error state."""
    if term:
        return MSG_NO_MATCHES.format(term=term)
    if state.error:
        return MSG_UNABLE_TO_LOAD
    return MSG_NO_SCHOOLS
