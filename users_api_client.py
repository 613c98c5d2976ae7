"""Mobile App Web Service client.

A small wrapper around the REST API served by ``mobile_app_ws``.  The
same client talks to either variant of the user resource:

* ``UsersApiClient(base_url=...)`` – the in‑memory ``/users`` routes.
* ``UsersApiClient(base_url=..., persisted=True)`` – the SQLite backed
  ``/jpa/users`` routes.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or empty) and ``error``
is a dictionary with ``status_code`` and ``message``.  A lookup of an
unknown user succeeds with ``data`` set to ``None`` because the
service answers it with 204 No Content.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class UsersApiClient:
    """Client for the user endpoints of the Mobile App Web Service."""

    def __init__(
        self,
        *,
        base_url: str,
        persisted: bool = False,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            persisted: Use the ``/jpa/users`` routes instead of ``/users``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.resource = "/jpa/users" if persisted else "/users"
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)`` where ``data`` is the decoded JSON
            body (``None`` for empty responses).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self, page: int = 1, limit: int = 50) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", self.resource, params={"page": page, "limit": limit})
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: Any) -> Result:
        """Fetch a user; ``(None, None)`` when it does not exist."""
        return self._request("GET", f"{self.resource}/{user_id}")

    def create_user(self, payload: Dict[str, Any]) -> Result:
        """Create a user from ``firstName``, ``lastName``, ``email`` and ``password``."""
        return self._request("POST", self.resource, json_body=payload)

    def update_user(self, user_id: Any, payload: Dict[str, Any]) -> Result:
        """Change a user's ``firstName`` and ``lastName``."""
        return self._request("PUT", f"{self.resource}/{user_id}", json_body=payload)

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Dict[str, Any]]]:
        _, error = self._request("DELETE", f"{self.resource}/{user_id}")
        if error:
            return False, error
        return True, None
