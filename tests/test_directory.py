import requests

from conftest import FakeApi, make_school
from domain.constants import (
    MSG_DELETE_FAILED, MSG_DELETE_REJECTED, MSG_LIST_FAILED, MSG_LIST_NO_DATA,
    MSG_NO_SCHOOLS, MSG_UNABLE_TO_LOAD,
)
from services.directory import (
    DirectoryState, delete_school, empty_message, filter_schools, load_directory,
)
from services.errors import ServerReportedFailure, TransportError


def test_successful_load_populates_exactly_the_records():
    records = [make_school(1), make_school(2)]
    state = load_directory(FakeApi(records), DirectoryState())
    assert state.schools == records
    assert state.error == ''
    assert state.loading is False


def test_server_failure_yields_empty_list_and_banner():
    state = DirectoryState(schools=[make_school(1)])
    load_directory(FakeApi(list_error=ServerReportedFailure("no data")), state)
    assert state.schools == []
    assert state.error == MSG_LIST_NO_DATA


def test_network_failure_then_retry_reissues_fetch():
    api = FakeApi([make_school(1)], list_error=TransportError("refused"))
    state = load_directory(api, DirectoryState())
    assert state.schools == []
    assert state.error == MSG_LIST_FAILED
    assert empty_message(state, '') == MSG_UNABLE_TO_LOAD

    api.list_error = None
    load_directory(api, state)
    assert api.list_calls == 2
    assert state.error == ''
    assert [s.id for s in state.schools] == [1]


def test_search_matches_name_city_or_state_case_insensitively():
    schools = [
        make_school(1, name="Springfield Elementary"),
        make_school(2, city="Palm Springs"),
        make_school(3, state="SPRINGLAND"),
        make_school(4, name="Oak Ridge", city="Denver", state="Colorado"),
    ]
    # address is not searched
    schools[3].address = "1 Spring Street"
    assert [s.id for s in filter_schools(schools, "spring")] == [1, 2, 3]
    assert filter_schools(schools, "") == schools


def test_delete_removes_only_that_record():
    state = DirectoryState(schools=[make_school(1), make_school(2), make_school(3)], loading=False)
    api = FakeApi()
    assert delete_school(api, state, 2) is True
    assert api.deleted == [2]
    assert [s.id for s in state.schools] == [1, 3]


def test_rejected_delete_keeps_local_state():
    state = DirectoryState(schools=[make_school(1), make_school(2)], loading=False)
    assert delete_school(FakeApi(delete_error=ServerReportedFailure("no")), state, 1) is False
    assert [s.id for s in state.schools] == [1, 2]
    assert state.error == MSG_DELETE_REJECTED


def test_failed_delete_request_keeps_local_state():
    state = DirectoryState(schools=[make_school(1)], loading=False)
    err = TransportError(str(requests.exceptions.Timeout("slow")))
    assert delete_school(FakeApi(delete_error=err), state, 1) is False
    assert len(state.schools) == 1
    assert state.error == MSG_DELETE_FAILED


def test_empty_messages():
    state = DirectoryState(loading=False)
    assert empty_message(state, "zzz") == 'No schools found matching "zzz".'
    assert empty_message(state, '') == MSG_NO_SCHOOLS
