"""Contact API client.

A thin wrapper around the two contact endpoints built on the
``requests`` library:

* :meth:`ContactAPI.get_contact` – look a contact up by exact name.
* :meth:`ContactAPI.create_contact` – create a contact.

Like the server, the client treats a missing contact as a normal
outcome rather than an error.  Failures (HTTP errors and transport
problems) are never raised; every method returns a tuple whose last
element is either ``None`` or a dictionary with ``status_code`` and
``message`` keys describing what went wrong.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class ContactAPI:
    """Client for the contact endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        contact_path: str = "/contact",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            contact_path: Path of the contact resource, including any
                ``API_PREFIX`` the server was started with.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.contact_path = "/" + contact_path.strip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request against the contact resource.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            body (``None`` for empty bodies) and ``error`` is ``None`` on
            success.  On failure ``data`` is ``None`` and ``error``
            carries ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{self.contact_path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
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
                    if isinstance(err_json, dict):
                        message = str(err_json.get("detail") or err_json.get("message") or err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Contact API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("Contact API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def get_contact(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a contact by name.

        Returns:
            A tuple ``(contact, error)``.  ``contact`` is ``None`` both
            when the name is unknown and when the request failed; check
            ``error`` to tell the two apart.
        """
        data, error = self._request("GET", params={"name": name})
        if error:
            return None, error
        return data, None

    def create_contact(self, payload: Optional[Dict[str, Any]]) -> Tuple[bool, Optional[ApiError]]:
        """Create a contact from ``payload`` (``name``, ``number``, ``type``).

        Returns:
            A tuple ``(success, error)``.  Validation failures come back
            with ``status_code`` 400 and the server's message.
        """
        _, error = self._request("POST", json_body=payload)
        if error:
            return False, error
        return True, None
