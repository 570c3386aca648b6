"""
HTTP client for the ChooJobs API.
"""

from typing import Any, Dict, Optional

import requests

from choojobs.exceptions import (
    ApiConnectionError,
    ApiError,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
)
from choojobs.utils.logger import get_logger

logger = get_logger(__name__)

STATUS_ERRORS = {
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
}


class ApiClient:
    """Thin wrapper around a requests session bound to one API and one user token."""

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: int = 30,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Root URL of the API, e.g. http://localhost:4000
            token: Bearer token of the signed-in user
            timeout: Request timeout in seconds
            session: Optional requests session to reuse
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {"Accept": "application/json"}

    def url_for(self, path: str) -> str:
        """Absolute URL for an API path."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        headers = dict(self.headers)
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request_raw(self, method: str, path: str, **kwargs) -> requests.Response:
        """
        Send a request and return the response once it is known to be successful.

        Args:
            method: HTTP method
            path: API path, e.g. /jobs
            **kwargs: Passed to requests (params, json, files, data)

        Returns:
            The successful response

        Raises:
            ApiConnectionError: If the API could not be reached
            ApiError: If the API answered with an error status
        """
        url = self.url_for(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs
            )
        except requests.RequestException as e:
            logger.error(f"❌ {method} {path} failed: {e}")
            raise ApiConnectionError(f"Could not reach the API: {e}") from e

        if response.status_code >= 400:
            detail = self._error_detail(response)
            error_class = STATUS_ERRORS.get(response.status_code, ApiError)
            logger.error(f"❌ {method} {path} -> {response.status_code}: {detail or response.reason}")
            raise error_class(
                f"{method} {path} failed with status {response.status_code}",
                status_code=response.status_code,
                detail=detail
            )

        return response

    def request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send a request and decode the JSON body.

        Returns:
            Decoded JSON, or None for an empty body
        """
        response = self.request_raw(method, path, **kwargs)
        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"❌ {method} {path} returned a non-JSON body")
            raise ApiError(
                f"{method} {path} returned invalid JSON",
                status_code=response.status_code
            ) from e

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    @staticmethod
    def _error_detail(response: requests.Response) -> Optional[str]:
        """Pull the API's error text out of an error response."""
        try:
            body = response.json()
        except ValueError:
            return None

        return _body_detail(body)


def unwrap(data: Any, key: str, path: str) -> Any:
    """
    Pull ``key`` out of a successful JSON response.

    Args:
        data: Decoded response body
        key: Envelope key holding the payload, e.g. data or token
        path: API path, for the error message

    Raises:
        ApiError: If the body is not an object or the key is empty
    """
    if not isinstance(data, dict) or not data.get(key):
        detail = _body_detail(data)
        logger.error(f"❌ {path} response has no '{key}'")
        raise ApiError(f"{path} response has no '{key}'", detail=detail)
    return data[key]


def _body_detail(body: Any) -> Optional[str]:
    """The API's ``error`` or ``message`` text from a decoded body."""
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return None
