"""PaLevel API client.

This module defines a small client wrapper around the PaLevel listings
API.  It performs the same calls the web frontend makes and is handy
for scripts, bots and smoke tests against a deployed backend.  The
client uses the ``requests`` library internally to make HTTP calls.

The client exposes high‑level methods:

* :meth:`get_welcome_message` – fetch the greeting from ``/api/hello``.
* :meth:`list_listings` – return every listing.
* :meth:`create_listing` – add a new listing.

None of the methods raise on HTTP or network errors.  Each returns a
tuple ``(result, error)`` where ``error`` is ``None`` on success and
otherwise a dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PaLevelAPI:
    """Client for interacting with the PaLevel API."""

    HELLO_PATH = "/api/hello"
    LISTINGS_PATH = "/api/listings"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the backend, e.g. ``http://localhost:5000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server before giving up.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/listings``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc.response) or str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _error_message(response: Optional[requests.Response]) -> str:
        """Extract a human readable message from an error response."""
        if response is None:
            return ""
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            # The listings API reports ``error``; framework errors use ``detail``.
            for key in ("error", "detail", "message"):
                if body.get(key):
                    return str(body[key])
        return str(body)

    # ------------------------------------------------------------------
    # API operations
    # ------------------------------------------------------------------
    def get_welcome_message(self) -> Tuple[Optional[str], Optional[Error]]:
        """Fetch the welcome message.

        Returns:
            A tuple ``(message, error)``.
        """
        data, error = self._request("GET", self.HELLO_PATH)
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get("message"), None
        return None, None

    def list_listings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all listings.

        Returns:
            A tuple ``(listings, error)``. ``listings`` is empty on failure.
        """
        data, error = self._request("GET", self.LISTINGS_PATH)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_listing(
        self,
        name: str,
        location: str,
        price: Union[str, int, float],
        contact: str,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a new listing.

        Returns:
            A tuple ``(listing, error)``.  A listing with a missing
            field is rejected by the server with status code 400.
        """
        payload = {"name": name, "location": location, "price": price, "contact": contact}
        data, error = self._request("POST", self.LISTINGS_PATH, json_body=payload)
        if error:
            return None, error
        return data, None
