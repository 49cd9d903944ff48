"""
Link resolver - Domain service following a path of attribute descriptors through the API.

Each descriptor selects links at one level of the hierarchy. Every intermediate
descriptor must select exactly one link, which becomes the root for the next one;
the last descriptor may select any number of links.
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence, Tuple

from ..errors import AmbiguousPath, NonexistentComponent
from ..interfaces.link_store import LinkStore
from ..models.link import (
    LinkDescriptor,
    LinkRecord,
    PathElement,
    absolute_uri,
    as_descriptor,
    looks_like_uri,
)


class LinkResolver:
    """Resolve descriptor paths against a link store, starting from the API entry point."""

    def __init__(
        self,
        store: LinkStore,
        entry_point: str,
        logger: Optional[logging.Logger] = None
    ):
        self._store = store
        self._entry_point = entry_point
        self._logger = logger or logging.getLogger(__name__)

    @property
    def entry_point(self) -> str:
        return self._entry_point

    def get_links(self, *path: Any) -> List[LinkRecord]:
        """Traverse ``path`` and return the links matching its last descriptor.

        The first argument may be a URI to start from instead of the entry point.
        A plain string descriptor is shorthand for ``{"category": string}``::

            resolver.get_links("md", {"category": "project", "title": "Sales"})
        """
        root, descriptors = self._split_path(path)
        if not descriptors:
            return list(self._store.get_or_fetch(root))

        for descriptor in descriptors[:-1]:
            found = self._matches(root, descriptor)
            if not found:
                raise NonexistentComponent(descriptor, root)
            if len(found) > 1:
                raise AmbiguousPath(descriptor, root, found)
            root = found[0].link

        return self._matches(root, descriptors[-1])

    def links(self, *path: Any) -> List[LinkRecord]:
        """Like ``get_links``, recovering once from a stale cache.

        An empty result drops every cached entry and repeats the traversal a single
        time; whatever the second attempt yields is returned.
        """
        found = self.get_links(*path)
        if found:
            return found
        self._logger.info(f"No links for {self._describe(path)}, refreshing link cache")
        self._store.invalidate_all()
        return self.get_links(*path)

    def get_uri(self, *path: Any) -> Optional[str]:
        """Return the URI of the first link ``links`` finds, or None."""
        found = self.links(*path)
        if not found:
            return None
        return found[0].link

    def _matches(self, root: str, descriptor: LinkDescriptor) -> List[LinkRecord]:
        return [record for record in self._store.get_or_fetch(root) if record.matches(descriptor)]

    def _split_path(self, path: Sequence[Any]) -> Tuple[str, List[LinkDescriptor]]:
        if path and looks_like_uri(path[0]):
            # Explicit roots are resolved like any other link found under the entry point
            root, rest = absolute_uri(path[0], self._entry_point), path[1:]
        else:
            root, rest = self._entry_point, path
        descriptors: List[LinkDescriptor] = [as_descriptor(element) for element in rest]
        return root, descriptors

    @staticmethod
    def _describe(path: Sequence[PathElement]) -> str:
        return " / ".join(str(element) for element in path) or "<root>"
