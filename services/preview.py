import base64
import hashlib
from typing import Optional, Tuple

from domain.models import ImageFile


def preview_data_url(image: Optional[ImageFile]) -> Optional[str]:
    """Pure mapping from a selected file to a displayable data URL."""
    if image is None:
        return None
    encoded = base64.b64encode(image.content).decode('ascii')
    return f"data:{image.mime_type};base64,{encoded}"


class ImagePreview:
    """
    Keeps the preview in step with the file selection.

    ``update`` is called on every rerun with the current selection; when the
    selection changed, the old preview is released before the new one is built.
    """

    def __init__(self):
        self._source: Optional[Tuple[str, str]] = None
        self.url: Optional[str] = None

    @staticmethod
    def _fingerprint(image: Optional[ImageFile]) -> Optional[Tuple[str, str]]:
        if image is None:
            return None
        return image.filename, hashlib.sha1(image.content).hexdigest()

    def update(self, image: Optional[ImageFile]) -> Optional[str]:
        source = self._fingerprint(image)
        if source == self._source:
            return self.url
        self.release()
        self._source = source
        self.url = preview_data_url(image)
        return self.url

    def release(self) -> None:
        self._source = None
        self.url = None
