"""
Shared HTTP client for the remote garage API.

Every page talks to the backend through one ``ApiClient``. It prefixes the
configured base URL, sends JSON, attaches the signed-in user's bearer token
and turns HTTP failures into ``ApiError``.
"""
import logging
from typing import Any, Optional

import requests

from autocare_console.config import get_settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the remote API call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.data = data

    @property
    def has_response(self) -> bool:
        return self.status_code is not None


class SessionExpired(ApiError):
    """Raised on a 401 from the backend; the console signs the user out."""


def json_session() -> requests.Session:
    """A pooled session that sends JSON bodies."""
    session = requests.Session()
    session.headers.update({"Content-Type": "application/json"})
    return session


class ApiClient:
    """Thin wrapper around ``requests.Session`` bound to one backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self.token = token
        # A shared session is used as given; create_app sets it up
        self.session = session or json_session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Any = None,
    ) -> Any:
        """
        Perform a request and return the decoded JSON body.

        Returns None when the backend answers with an empty body.
        """
        url = self.url_for(path)
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        try:
            response = self.session.request(
                method,
                url,
                params=params or None,
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.debug("%s %s failed: %s", method, url, e)
            raise ApiError(f"Network error calling {method} {path}") from e

        data = _decode(response)

        if response.status_code == 401:
            raise SessionExpired("Session expired", status_code=401, data=data)
        if response.status_code >= 400:
            raise ApiError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                data=data,
            )

        return data

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("POST", path, params=params, json=json)

    def put(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("PUT", path, params=params, json=json)

    def patch(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("PATCH", path, params=params, json=json)

    def delete(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request("DELETE", path, params=params)

    def close(self) -> None:
        self.session.close()


def _decode(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def unwrap(data: Any, *keys: str) -> Any:
    """
    Return the payload nested under the first present key.

    The backend wraps some payloads in ``body`` or ``data`` and not others.
    """
    if isinstance(data, dict):
        for key in keys:
            if data.get(key) is not None:
                return data[key]
    return data
