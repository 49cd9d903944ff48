"""
Transport protocol interface.
Defines the contract the link cache and wrapper operations use to talk HTTP.
"""

from __future__ import annotations
from typing import Any, Protocol


class Transport(Protocol):
    """Protocol for synchronous JSON transports.

    Bodies are generic decoded JSON values. Failures raise ``TransportError``.
    """

    def get(self, uri: str) -> Any:
        """Fetch and decode a resource."""
        ...

    def post(self, uri: str, body: Any) -> Any:
        """Send a JSON body and decode the response."""
        ...

    def delete(self, uri: str) -> bool:
        """Delete a resource."""
        ...
