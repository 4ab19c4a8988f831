"""Client-side validation rules for the create-school form.

Each field has a required-message and at most one further rule (minimum
length or pattern). Values are checked exactly as typed.
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

CONTACT_PATTERN = re.compile(r'[6-9][0-9]{9}')
EMAIL_PATTERN = re.compile(r'[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}', re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class FieldRule:
    required_message: str
    min_length: Optional[int] = None
    pattern: Optional[re.Pattern] = None
    message: Optional[str] = None


FIELD_RULES: Dict[str, FieldRule] = {
    'name': FieldRule("School name is required", min_length=2,
                      message="School name must be at least 2 characters"),
    'address': FieldRule("Address is required", min_length=10,
                         message="Address must be at least 10 characters"),
    'city': FieldRule("City is required", min_length=2,
                      message="City must be at least 2 characters"),
    'state': FieldRule("State is required", min_length=2,
                       message="State must be at least 2 characters"),
    'contact': FieldRule("Contact number is required", pattern=CONTACT_PATTERN,
                         message="Please enter a valid 10-digit Indian mobile number"),
    'email_id': FieldRule("Email is required", pattern=EMAIL_PATTERN,
                          message="Please enter a valid email address"),
}

IMAGE_REQUIRED_MESSAGE = "School image is required"


def is_valid_contact(value: str) -> bool:
    return bool(value) and CONTACT_PATTERN.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    return bool(value) and EMAIL_PATTERN.fullmatch(value) is not None


def validate_field(field: str, value: Optional[str]) -> Optional[str]:
    """Return the message of the first rule ``value`` breaks, or None."""
    rule = FIELD_RULES[field]
    if not value:
        return rule.required_message
    if rule.min_length is not None and len(value) < rule.min_length:
        return rule.message
    if rule.pattern is not None and rule.pattern.fullmatch(value) is None:
        return rule.message
    return None


def validate_school_form(values: Dict[str, Any], image: Any = None) -> Dict[str, str]:
    """
    Validates every form field and the image selection.

    Args:
        values: Text field values keyed by field name.
        image: The selected image upload, or None.

    Returns:
        Dict[str, str]: field -> message for each failing field, in form order.
        An empty dict means the form may be submitted.
    """
    errors: Dict[str, str] = {}
    for field in FIELD_RULES:
        message = validate_field(field, values.get(field))
        if message:
            errors[field] = message
    if image is None:
        errors['image'] = IMAGE_REQUIRED_MESSAGE
    return errors
