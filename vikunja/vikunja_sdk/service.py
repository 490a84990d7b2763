#!/usr/bin/env python3
"""
Vikunja Service Base Class

VikunjaService is the request executor shared by every resource service:
it builds the URL, attaches headers, performs exactly one HTTP call and
either returns the parsed body or raises a VikunjaError.
"""

import logging
import mimetypes
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import requests

from .errors import VikunjaError, error_for_status
from .infrastructure import build_session, get_config
from .params import build_query_params, transform_params

# Configure logging
logger = logging.getLogger(__name__)

RESPONSE_TYPES = ("json", "text", "blob")


class VikunjaService:
    """
    Base class for all Vikunja resource services.

    Holds the base URL, the bearer token and the HTTP session. Subclasses add
    one method per API operation, each a thin call to _request().
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize service.

        Args:
            base_url: API base URL including the /api/v1 prefix
            token: Optional bearer token
            session: Optional shared requests.Session (created if omitted)
            timeout: Request timeout in seconds (defaults to VIKUNJA_TIMEOUT)
        """
        self.base_url = base_url.rstrip("/")
        self._token = token or None
        self._session = session if session is not None else build_session()
        self._timeout = timeout if timeout is not None else get_config().timeout

    @property
    def token(self) -> Optional[str]:
        return self._token

    def set_token(self, token: str) -> None:
        """Set the bearer token used for subsequent requests."""
        self._token = token or None

    def clear_token(self) -> None:
        """Forget the bearer token; later requests go out unauthenticated."""
        self._token = None

    def build_url(self, endpoint: str) -> str:
        """Join the base URL and an endpoint path."""
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.base_url}{endpoint}"

    def _build_headers(
        self,
        multipart: bool,
        extra: Optional[Dict[str, str]],
        authenticated: bool,
    ) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        # requests sets the multipart boundary itself
        if not multipart:
            headers["Content-Type"] = "application/json"
        if extra:
            headers.update(extra)
        if authenticated and self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _request(
        self,
        endpoint: str,
        method: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        files: Optional[Dict[str, Any]] = None,
        response_type: str = "json",
        authenticated: bool = True,
    ) -> Any:
        """
        Make a request against the Vikunja API.

        Args:
            endpoint: Path relative to the base URL (e.g. '/tasks/42')
            method: HTTP method
            body: JSON-serializable body (ignored for GET); form fields for
                  multipart uploads
            params: Query parameters, run through the parameter transformer
            headers: Extra headers
            files: Multipart files; switches the request to form encoding
            response_type: 'json', 'text' or 'blob'
            authenticated: Send the Authorization header when a token is set

        Returns:
            Parsed JSON ({} for empty responses), text, or raw bytes

        Raises:
            VikunjaError: On any HTTP error status, network failure, or
                          unreadable success body (subclass by status)
        """
        if response_type not in RESPONSE_TYPES:
            raise ValueError(f"Invalid response_type: {response_type}")

        method = method.upper()
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        url = self.build_url(endpoint)

        multipart = files is not None
        request_kwargs: Dict[str, Any] = {
            "method": method,
            "url": url,
            "headers": self._build_headers(multipart, headers, authenticated),
            "params": build_query_params(transform_params(params, endpoint)) or None,
            "timeout": self._timeout,
        }
        if multipart:
            request_kwargs["files"] = files
            if body is not None:
                request_kwargs["data"] = body
        elif body is not None and method != "GET":
            request_kwargs["json"] = body

        logger.debug(f"{method} {url}")

        try:
            resp = self._session.request(**request_kwargs)
        except requests.RequestException as e:
            message = str(e) or "Network error"
            logger.warning(f"Network error during {method} {endpoint}: {message}")
            raise VikunjaError(
                message,
                endpoint=endpoint,
                method=method,
                status_code=0,
                code=0,
                response={"message": message},
            ) from e

        if not 200 <= resp.status_code < 300:
            raise self._error_from_response(resp, endpoint, method)

        return self._parse_response(resp, endpoint, method, response_type)

    def _error_from_response(
        self, resp: requests.Response, endpoint: str, method: str
    ) -> VikunjaError:
        """Map a non-2xx response onto the matching VikunjaError subclass."""
        status = resp.status_code
        fallback = f"API request failed with status {status}"

        try:
            error_data = resp.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict):
            message = error_data.get("message") or fallback
            code = error_data.get("code") or 0
            response = error_data
        else:
            message = fallback
            code = 0
            response = {}

        logger.warning(f"API error {status} during {method} {endpoint}: {message}")
        return error_for_status(
            message,
            endpoint=endpoint,
            method=method,
            status_code=status,
            code=code,
            response=response,
        )

    def _parse_response(
        self,
        resp: requests.Response,
        endpoint: str,
        method: str,
        response_type: str,
    ) -> Any:
        if response_type == "blob":
            return resp.content
        if response_type == "text":
            return resp.text

        if (
            resp.status_code == 204
            or resp.headers.get("Content-Length") == "0"
            or not resp.content
        ):
            return {}

        try:
            return resp.json()
        except ValueError as e:
            logger.warning(f"Unreadable response body from {method} {endpoint}: {e}")
            raise error_for_status(
                f"Invalid JSON in response (status {resp.status_code})",
                endpoint=endpoint,
                method=method,
                status_code=resp.status_code,
            ) from e


def build_upload(
    field: str,
    file_path: Optional[str] = None,
    file_content: Optional[bytes] = None,
    file_name: Optional[str] = None,
    content_type: Optional[str] = None,
) -> Dict[str, Tuple[str, bytes, str]]:
    """
    Build the `files` mapping for a multipart upload.

    Accepts either a path on disk or raw bytes plus a file name. The content
    type is guessed from the file name when not given.

    Args:
        field: Form field name the server expects (e.g. 'files', 'avatar')
        file_path: Path to the file to upload (use this OR file_content)
        file_content: Raw bytes to upload (use this OR file_path)
        file_name: Name for the file (required with file_content,
                   defaults to the basename with file_path)
        content_type: MIME type (auto-detected from the name if omitted)

    Returns:
        Dict suitable for requests' `files=` argument

    Raises:
        ValueError: If inputs are missing, conflicting, or the file does not exist

    Example:
        files = build_upload('files', file_path='/tmp/screenshot.png')
        files = build_upload('avatar', file_content=png_bytes, file_name='me.png')
    """
    if not file_path and file_content is None:
        raise ValueError("Either file_path or file_content is required")

    if file_path and file_content is not None:
        raise ValueError("Provide either file_path or file_content, not both")

    if file_path:
        path = Path(file_path)
        if not path.exists():
            raise ValueError(f"File not found: {file_path}")

        file_name = file_name or path.name
        with open(path, "rb") as f:
            file_content = f.read()
    elif not file_name:
        raise ValueError("file_name is required when using file_content")

    if not content_type:
        content_type, _ = mimetypes.guess_type(file_name)
        content_type = content_type or "application/octet-stream"

    logger.debug(
        f"Prepared upload '{file_name}' ({content_type}, {len(file_content)} bytes) as '{field}'"
    )
    return {field: (file_name, file_content, content_type)}
