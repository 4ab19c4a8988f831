"""
School Directory API client.

Thin wrapper over the external REST service that stores school records.
All three calls share one base URL taken from configuration.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests

from domain.models import ImageFile, SchoolId, SchoolRecord, school_from_dict
from services.config import get_settings
from services.errors import ServerReportedFailure, TransportError

logger = logging.getLogger(__name__)

SCHOOLS_ENDPOINT = "api/schools"
FORM_FIELDS = ("name", "address", "city", "state", "contact", "email_id")


class SchoolsApi:
    """
    Client for creating, listing and deleting school records.
    """

    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        """
        Args:
            base_url: Backend root, e.g. ``http://localhost:5000``
            timeout: Seconds to wait for each request before giving up
            session: Optional pre-built session (tests inject a mock here)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @classmethod
    def from_settings(cls) -> "SchoolsApi":
        settings = get_settings()
        return cls(settings.api_base_url, timeout=settings.request_timeout)

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint}"

    def _send(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Issue one request; anything but a 2xx response becomes a TransportError."""
        url = self._url(endpoint)
        logger.info("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("API request failed: %s", e)
            raise TransportError(str(e), status_code=status) from e
        except requests.exceptions.RequestException as e:
            logger.error("API request failed: %s", e)
            raise TransportError(str(e)) from e

    @staticmethod
    def _json_object(response: requests.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise ServerReportedFailure("Response body is not JSON") from e
        if not isinstance(body, dict):
            raise ServerReportedFailure("Response body is not a JSON object")
        return body

    def create_school(self, fields: Mapping[str, str], image: Optional[ImageFile]) -> Optional[Any]:
        """
        Submit a new school as multipart form data.

        Any 2xx response counts as success; its JSON body (if any) is returned.
        """
        data = {name: fields.get(name, '') for name in FORM_FIELDS}
        files = None
        if image is not None:
            files = {"image": (image.filename, image.content, image.mime_type)}
        response = self._send("POST", SCHOOLS_ENDPOINT, data=data, files=files)
        try:
            return response.json()
        except ValueError:
            return None

    def list_schools(self) -> List[SchoolRecord]:
        """
        Fetch every school record.

        Returns:
            The records in server order.

        Raises:
            TransportError: request failed or returned non-2xx.
            ServerReportedFailure: success flag missing/false or no data array.
        """
        body = self._json_object(self._send("GET", SCHOOLS_ENDPOINT))
        data = body.get("data")
        if not body.get("success") or not isinstance(data, list):
            logger.warning("Unexpected list response format: success=%r", body.get("success"))
            raise ServerReportedFailure("No schools data received from server")
        if not all(isinstance(item, dict) for item in data):
            raise ServerReportedFailure("School entries must be JSON objects")
        return [school_from_dict(item) for item in data]

    def delete_school(self, school_id: SchoolId) -> None:
        """Delete one school; raises ServerReportedFailure unless the server confirms."""
        endpoint = f"{SCHOOLS_ENDPOINT}/{quote(str(school_id), safe='')}"
        body = self._json_object(self._send("DELETE", endpoint))
        if not body.get("success"):
            logger.warning("Server refused delete of school %s", school_id)
            raise ServerReportedFailure(body.get("message") or "Failed to delete school")
