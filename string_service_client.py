"""String service API client.

A thin wrapper around the two routes served by the String Service
API.  It uses the ``requests`` library internally and mirrors the
service's own error split:

* :meth:`StringServiceAPI.uppercase` – upper-case a string;
* :meth:`StringServiceAPI.count` – count the characters of a string.

Every method returns a tuple ``(value, error)``.  ``error`` is ``None``
on success; otherwise it is a dictionary with the keys
``status_code`` and ``message``.  A transport failure (connection
error, HTTP error status, malformed reply) sets ``status_code`` to the
HTTP status, or ``None`` when no response was received.  A business
failure reported inside a successful reply (the ``err`` field of an
upper-case response) is returned with ``status_code`` 200 so callers
can tell the two apart.

Example::

    api = StringServiceAPI(base_url="http://localhost:8080")
    value, error = api.uppercase("hello, world")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class StringServiceAPI:
    """Client for the string service."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _post(self, path: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """POST ``payload`` as JSON to ``path``.

        Returns:
            A tuple ``(data, error)``.  ``data`` holds the decoded JSON
            object on success; on failure it is ``None`` and ``error``
            describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending POST request to %s", url)
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    body = exc.response.json()
                    if isinstance(body, dict):
                        message = str(body.get("detail") or "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("API returned a non-JSON body from %s: %s", url, exc)
            return None, {"status_code": response.status_code, "message": "invalid JSON in response"}
        if not isinstance(data, dict):
            return None, {"status_code": response.status_code, "message": "unexpected response shape"}
        return data, None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def uppercase(self, s: str) -> Tuple[Optional[str], Optional[Error]]:
        """Convert ``s`` to upper case.

        Returns:
            A tuple ``(value, error)``.  An empty ``s`` yields
            ``(None, {"status_code": 200, "message": "empty string"})``.
        """
        data, error = self._post("/uppercase", {"s": s})
        if error:
            return None, error
        if data.get("err"):
            return None, {"status_code": 200, "message": data["err"]}
        return data.get("v", ""), None

    def count(self, s: str) -> Tuple[Optional[int], Optional[Error]]:
        """Return the number of characters in ``s``."""
        data, error = self._post("/count", {"s": s})
        if error:
            return None, error
        return data.get("v"), None
