"""Create-form submission: validate, encode, send, report."""
import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from domain.constants import MSG_CREATE_FAILED, MSG_CREATE_SUCCESS
from domain.models import ImageFile
from domain.validation import validate_school_form
from services.errors import SchoolsApiError, ValidationError
from services.schools_api import SchoolsApi

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    ok: bool
    message: str = ''
    errors: Dict[str, str] = field(default_factory=dict)


def check_form(values: Mapping[str, str], image: Optional[ImageFile]) -> None:
    """Raise ValidationError unless every field passes its rule."""
    errors = validate_school_form(dict(values), image)
    if errors:
        raise ValidationError(errors)


def submit_school(api: SchoolsApi, values: Mapping[str, str], image: Optional[ImageFile]) -> SubmissionResult:
    """
    Validate the form and, only if it is clean, send exactly one create request.

    Validation failures come back as field-scoped ``errors`` with no banner;
    transport or server failures come back as the generic failure message.
    """
    try:
        check_form(values, image)
        api.create_school(values, image)
    except ValidationError as e:
        return SubmissionResult(ok=False, errors=e.errors)
    except SchoolsApiError as e:
        logger.error("Error adding school: %s", e)
        return SubmissionResult(ok=False, message=MSG_CREATE_FAILED)
    logger.info("School '%s' submitted", values.get('name'))
    return SubmissionResult(ok=True, message=MSG_CREATE_SUCCESS)
