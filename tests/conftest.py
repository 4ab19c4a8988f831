import sys
import types

import pytest

from domain.models import ImageFile, SchoolRecord


def make_school(i: int, name=None, city="Pune", state="Maharashtra"):
    return SchoolRecord(
        id=i,
        name=name or f"School {i}",
        address=f"{i} Long Example Road",
        city=city,
        state=state,
        contact="9876543210",
        email_id=f"school{i}@example.com",
        image=f"https://cdn.example.com/{i}.jpg",
    )


class FakeApi:
    """Stands in for SchoolsApi; records every call it receives."""

    def __init__(self, schools=None, list_error=None, delete_error=None, create_error=None):
        self.schools = list(schools or [])
        self.list_error = list_error
        self.delete_error = delete_error
        self.create_error = create_error
        self.list_calls = 0
        self.deleted = []
        self.created = []

    def list_schools(self):
        self.list_calls += 1
        if self.list_error:
            raise self.list_error
        return list(self.schools)

    def delete_school(self, school_id):
        self.deleted.append(school_id)
        if self.delete_error:
            raise self.delete_error

    def create_school(self, fields, image):
        self.created.append((dict(fields), image))
        if self.create_error:
            raise self.create_error
        return {'success': True}


@pytest.fixture
def valid_form():
    return {
        'name': "Springfield High",
        'address': "742 Evergreen Terrace",
        'city': "Springfield",
        'state': "Oregon",
        'contact': "9876543210",
        'email_id': "office@springfield.edu",
    }


@pytest.fixture
def image():
    return ImageFile(filename="front.png", content=b"\x89PNG\r\n\x1a\nfake", mime_type="image/png")


@pytest.fixture(autouse=True)
def _drop_stale_submodule_attributes():
    """Tests that import under a patched ``sys.modules`` leave submodules bound
    as attributes on their parent package after the patch is undone; unbind
    those so later imports load the real modules again."""
    yield
    for pkg_name in ("app", "domain", "services", "ui", "ui.components", "views"):
        pkg = sys.modules.get(pkg_name)
        if pkg is None:
            continue
        for attr, value in list(vars(pkg).items()):
            if (isinstance(value, types.ModuleType)
                    and value.__name__ == f"{pkg_name}.{attr}"
                    and sys.modules.get(value.__name__) is not value):
                delattr(pkg, attr)
