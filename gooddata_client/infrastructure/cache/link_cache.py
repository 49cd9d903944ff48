"""
Link cache - in-memory store of normalized link records per resource root.

Each client instance owns its own cache. There is no locking: share one instance
across threads only if the caller serializes access.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from ...domain.interfaces.transport import Transport
from ...domain.models.link import LinkRecord, canonical_uri
from ...domain.services.normalizer import ResponseNormalizer


class LinkCache:
    """Lazily populated map of resource root to link records."""

    def __init__(
        self,
        transport: Transport,
        normalizer: Optional[ResponseNormalizer] = None,
        logger: Optional[logging.Logger] = None
    ):
        self._transport = transport
        self._logger = logger or logging.getLogger(__name__)
        self._normalizer = normalizer or ResponseNormalizer(logger=self._logger)
        self._entries: Dict[str, List[LinkRecord]] = {}
        self._hits = 0
        self._misses = 0

    def get_or_fetch(self, root: str) -> List[LinkRecord]:
        """Return records for ``root``, fetching and normalizing the resource on a miss.

        Links are re-absolutized against ``root`` on every read, so records that
        were stored relative still come out absolute.
        """
        key = canonical_uri(root)
        records = self._entries.get(key)
        if records is None:
            self._misses += 1
            self._logger.debug(f"Link cache MISS for {key}")
            body = self._transport.get(root)
            records = self._normalizer.normalize(body, root)
            self._entries[key] = records
        else:
            self._hits += 1
            self._logger.debug(f"Link cache HIT for {key}")
        return [record.resolved_against(root) for record in records]

    def store(self, root: str, records: List[LinkRecord]) -> None:
        """Append records under ``root`` without fetching it.

        Seeds the cache with links already known, e.g. from a response obtained
        elsewhere or a fixture; later reads treat them like fetched records.
        """
        self._entries.setdefault(canonical_uri(root), []).extend(records)

    def invalidate_all(self) -> None:
        """Drop every cached entry."""
        count = len(self._entries)
        self._entries.clear()
        if count > 0:
            self._logger.info(f"Cleared {count} link cache entries")

    def __contains__(self, root: object) -> bool:
        return isinstance(root, str) and canonical_uri(root) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "roots": len(self._entries),
            "records": sum(len(records) for records in self._entries.values()),
            "hits": self._hits,
            "misses": self._misses,
        }
