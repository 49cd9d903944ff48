"""
GoodData agent - Infrastructure implementation of the Transport protocol.
Talks JSON to the GoodData API over a requests session and turns failures into TransportError.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Optional, Sequence

import requests

from ...domain.errors import TransportError
from ...domain.models.link import absolute_uri
from ..config.settings import GoodDataSettings

# Prefer JSON, but take whatever else comes in instead of letting the backend return 406s.
# XHTML makes the backend treat us as a browser and redirect on token expiration.
ACCEPT = 'application/json;q=0.9, text/plain;q=0.2, application/xhtml+xml;q=0.1, */*;q=0.1'


class GoodDataAgent:
    """HTTP client for the GoodData JSON API implementing the Transport protocol."""

    def __init__(
        self,
        settings: Optional[GoodDataSettings] = None,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        self._settings = settings or GoodDataSettings()
        self._logger = logger or logging.getLogger(__name__)
        # Session keeps the memory-backed cookie jar holding the login token
        self._session = session or requests.Session()
        self._session.headers.update({
            'Accept': ACCEPT,
            'User-Agent': self._settings.user_agent,
        })
        self._timeout = (self._settings.connect_timeout_s, self._settings.read_timeout_s)

    @property
    def root(self) -> str:
        return self._settings.root

    def get(self, uri: str) -> Any:
        """Fetch and decode a resource."""
        return self.request('GET', uri)

    def post(self, uri: str, body: Any) -> Any:
        """JSON-encode ``body``, post it and decode the response."""
        return self.request(
            'POST',
            uri,
            data=json.dumps(body),
            headers={'Content-Type': 'application/json'},
        )

    def delete(self, uri: str) -> bool:
        """Delete a resource."""
        self.request('DELETE', uri)
        return True

    def request(self, method: str, uri: str, **kwargs: Any) -> Any:
        """Issue a request against a URI relative to the API root and decode the response."""
        url = absolute_uri(uri, self.root)
        self._logger.debug(f"{method} {url}")
        try:
            response = self._session.request(
                method,
                url,
                timeout=self._timeout,
                verify=self._settings.verify_ssl,
                **kwargs
            )
        except requests.RequestException as e:
            self._logger.debug(f"{method} {url} failed: {e}")
            raise TransportError(f"Network error: {e}", uri=url) from e

        decoded = self._decode(response)
        if not response.ok:
            raise self._error(response, decoded, url)
        return decoded

    def close(self) -> None:
        self._session.close()

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        content_type = response.headers.get('Content-Type', '').split(';')[0].strip()
        if content_type == 'application/json':
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                return {'raw': response.text}
        return {'raw': response.text}

    def _error(self, response: requests.Response, decoded: Any, url: str) -> TransportError:
        status_line = f"{response.status_code} {response.reason or ''}".strip()
        self._logger.debug(f"{url} returned {status_line}")

        # Apache-level errors come without the error wrapper
        if isinstance(decoded, dict) and isinstance(decoded.get('error'), dict):
            decoded = decoded['error']
        if not isinstance(decoded, dict) or 'message' not in decoded:
            return TransportError(status_line, status=response.status_code, reason=response.reason, uri=url)

        parameters = decoded.get('parameters') or []
        return TransportError(
            format_message(decoded['message'], parameters),
            status=response.status_code,
            reason=response.reason,
            uri=url,
            parameters=parameters,
        )


def format_message(message: str, parameters: Sequence[Any]) -> str:
    """Fill printf-style placeholders of a server error message with its parameters."""
    if not parameters:
        return message
    try:
        return message % tuple(parameters)
    except (TypeError, ValueError):
        return f"{message} {list(parameters)}"
