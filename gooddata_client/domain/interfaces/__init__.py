"""Domain interfaces package - Protocols for ports."""

from .transport import Transport
from .link_store import LinkStore

__all__ = [
    "Transport",
    "LinkStore",
]
