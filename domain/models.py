from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional, Union

SchoolId = Union[int, str]


@dataclass
class SchoolRecord:
    id: Optional[SchoolId]
    name: str
    address: str
    city: str
    state: str
    contact: str
    email_id: str
    image: Optional[str] = None  # URL or data URL served by the backend

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def details_text(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Address: {self.address}\n"
            f"City: {self.city}\n"
            f"State: {self.state}\n"
            f"Contact: {self.contact}\n"
            f"Email: {self.email_id}"
        )


TEXT_FIELDS = ("name", "address", "city", "state", "contact", "email_id")


def school_from_dict(d: Dict[str, Any]) -> SchoolRecord:
    """Safe conversion from an API payload, dropping unknown keys.

    Missing text fields become empty strings so search and rendering never
    have to special-case ``None``.
    """
    filtered = {k: ('' if d.get(k) is None else str(d.get(k))) for k in TEXT_FIELDS}
    image = d.get('image')
    return SchoolRecord(id=d.get('id'), image=image or None, **filtered)


@dataclass(frozen=True)
class ImageFile:
    """A selected image upload, detached from the widget that produced it."""
    filename: str
    content: bytes
    mime_type: str = 'application/octet-stream'


def image_from_upload(upload: Any) -> Optional[ImageFile]:
    """Convert a Streamlit ``UploadedFile`` (or None) into an ImageFile."""
    if upload is None:
        return None
    return ImageFile(
        filename=upload.name,
        content=upload.getvalue(),
        mime_type=getattr(upload, 'type', None) or 'application/octet-stream',
    )
