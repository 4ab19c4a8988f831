from conftest import FakeApi
from domain.constants import MSG_CREATE_FAILED, MSG_CREATE_SUCCESS
from services.errors import TransportError
from services.submission import submit_school


def test_valid_form_sends_exactly_one_request(valid_form, image):
    api = FakeApi()
    result = submit_school(api, valid_form, image)
    assert result.ok
    assert result.message == MSG_CREATE_SUCCESS
    assert result.errors == {}
    assert api.created == [(valid_form, image)]


def test_invalid_form_never_reaches_the_server(valid_form, image):
    api = FakeApi()
    valid_form['contact'] = "5123456789"
    valid_form['city'] = "X"
    result = submit_school(api, valid_form, image)
    assert not result.ok
    assert result.message == ''
    assert set(result.errors) == {'contact', 'city'}
    assert api.created == []


def test_missing_image_is_a_field_error(valid_form):
    api = FakeApi()
    result = submit_school(api, valid_form, None)
    assert result.errors == {'image': "School image is required"}
    assert api.created == []


def test_transport_failure_reports_generic_message(valid_form, image):
    api = FakeApi(create_error=TransportError("500 Server Error", status_code=500))
    result = submit_school(api, valid_form, image)
    assert not result.ok
    assert result.message == MSG_CREATE_FAILED
    assert result.errors == {}
    assert len(api.created) == 1
