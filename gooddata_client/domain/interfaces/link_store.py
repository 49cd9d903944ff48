"""
Link store protocol interface.
Defines what the resolver needs from a cache of normalized link records.
"""

from __future__ import annotations
from typing import List, Protocol

from ..models.link import LinkRecord


class LinkStore(Protocol):
    """Protocol for link caches keyed by resource root."""

    def get_or_fetch(self, root: str) -> List[LinkRecord]:
        """Return the records found under ``root``, fetching them on a miss."""
        ...

    def invalidate_all(self) -> None:
        """Drop every cached entry."""
        ...
