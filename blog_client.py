"""Blog Posts API client.

This module defines a small client wrapper around the Blog Posts REST
API.  It uses the ``requests`` library internally and exposes one
method per operation:

* :meth:`BlogAPIClient.health` – check that the service is up.
* :meth:`BlogAPIClient.list_posts` – return every post.
* :meth:`BlogAPIClient.get_post` – fetch a single post by ID.
* :meth:`BlogAPIClient.create_post` – create a post.
* :meth:`BlogAPIClient.update_post` – replace a post's fields.
* :meth:`BlogAPIClient.delete_post` – delete a post.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``.  On failure ``data`` is empty and ``error`` is a dict
with keys ``status_code``, ``error`` and ``message`` taken from the
service's error body, or describing the transport failure.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.  To enable this behaviour,
initialise the client with ``api_key='<your token>'``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

Error = Dict[str, Any]


class BlogAPIClient:
    """Client for interacting with the Blog Posts API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
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
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/health``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for an empty body.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "error": "request_failed", "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        error = "http_error"
        message = ""
        if response is not None:
            try:
                body = response.json()
            except ValueError:
                message = response.text
            else:
                if isinstance(body, dict):
                    error = body.get("error") or error
                    message = body.get("message") or ""
                else:
                    message = str(body)
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "error": error, "message": message}

    @staticmethod
    def _post_payload(title: str, content: str, author: str) -> Dict[str, str]:
        return {"title": title, "content": content, "author": author}

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Tuple[bool, Optional[Error]]:
        data, error = self._request("GET", "/health")
        if error:
            return False, error
        return isinstance(data, dict) and data.get("status") == "ok", None

    def list_posts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all posts, ordered by ID."""
        data, error = self._request("GET", f"{API_PREFIX}/posts")
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("posts"), list):
            return data["posts"], None
        return [], None

    def get_post(self, post_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{API_PREFIX}/posts/{post_id}")

    def create_post(
        self, title: str, content: str, author: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST", f"{API_PREFIX}/posts", json_body=self._post_payload(title, content, author)
        )

    def update_post(
        self, post_id: int, title: str, content: str, author: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "PUT",
            f"{API_PREFIX}/posts/{post_id}",
            json_body=self._post_payload(title, content, author),
        )

    def delete_post(self, post_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a post.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"{API_PREFIX}/posts/{post_id}")
        if error:
            return False, error
        return True, None
