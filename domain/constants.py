"""
Centralized UI constants: page paths, field labels and every user-facing
message, so views and services never drift apart on wording.
"""

APP_TITLE = "School Management"

# Router paths, mirrored in the ``page`` query parameter
HOME_PATH = "/"
ADD_SCHOOL_PATH = "/add-school"
SCHOOLS_PATH = "/schools"

# Shown whenever a record has no image or the browser fails to load it
FALLBACK_IMAGE_URL = (
    "https://images.unsplash.com/photo-1580582932707-520aed937b7b?w=400&h=300&fit=crop"
)

# Form field labels, in form order
FIELD_LABELS = {
    'name': "School Name *",
    'address': "Address *",
    'city': "City *",
    'state': "State *",
    'contact': "Contact Number *",
    'email_id': "Email ID *",
    'image': "School Image *",
}

FIELD_PLACEHOLDERS = {
    'name': "Enter school name",
    'address': "Enter complete address",
    'city': "Enter city",
    'state': "Enter state",
    'contact': "Enter 10-digit mobile number",
    'email_id': "Enter email address",
}

IMAGE_TYPES = ["png", "jpg", "jpeg", "gif", "webp", "bmp", "svg"]

# Create-form status
MSG_CREATE_SUCCESS = "School added successfully!"
MSG_CREATE_FAILED = "Error adding school. Please try again."

# List / delete status
MSG_LIST_NO_DATA = "No schools data received from server"
MSG_LIST_FAILED = "Failed to fetch schools. Please check if the server is running."
MSG_DELETE_CONFIRM = "Are you sure you want to delete this school?"
MSG_DELETE_SUCCESS = "School deleted successfully!"
MSG_DELETE_REJECTED = "Failed to delete school"
MSG_DELETE_FAILED = "Failed to delete school. Please try again."
MSG_EDIT_UNSUPPORTED = "Editing is not supported by the directory service yet."

# Empty grid states
MSG_NO_MATCHES = 'No schools found matching "{term}".'
MSG_UNABLE_TO_LOAD = "Unable to load schools. Please check your connection and try again."
MSG_NO_SCHOOLS = "No schools available. Add some schools to get started."
