"""
Response normalizer - Domain service turning one decoded resource body into link records.

The API has no formal schema. Three body shapes are recognized and tried in order:

1. Descriptive root: ``{"about": {"links": ...}}`` where ``links`` maps category to URI
   or is a list of link-shaped objects.
2. Query result: ``{"query": {"entries": [...]}}`` with link-shaped entries.
3. Aggregate: a single top-level key naming the structure, holding one object or a list
   of objects keyed by type name, each with optional ``links`` and ``meta`` mappings.

Anything else raises ``UnparseableResource`` rather than guessing.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Optional

from ..errors import UnparseableResource
from ..models.link import LinkRecord, absolute_uri


class ResponseNormalizer:
    """Classify resource bodies and emit absolute link records."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def normalize(self, body: Any, root: str) -> List[LinkRecord]:
        """Return the link records found in ``body``, absolutized against ``root``."""
        if not isinstance(body, Mapping):
            raise UnparseableResource(root)

        for shape, parse in (
            ("about", self._from_about),
            ("query", self._from_query),
            ("aggregate", self._from_aggregate),
        ):
            records = parse(body, root)
            if records is not None:
                self._logger.debug(f"Found {len(records)} link(s) in {root} ({shape} shape)")
                return records

        raise UnparseableResource(root, [str(k) for k in body.keys()])

    def _from_about(self, body: Mapping[str, Any], root: str) -> Optional[List[LinkRecord]]:
        about = body.get("about")
        if not isinstance(about, Mapping) or "links" not in about:
            return None

        links = about["links"]
        if isinstance(links, Mapping):
            return [
                LinkRecord(link=absolute_uri(self._uri(uri, root), root), attributes={"category": category})
                for category, uri in links.items()
            ]
        if isinstance(links, list):
            return self._link_shaped(links, root)
        raise UnparseableResource(root, ["about"])

    def _from_query(self, body: Mapping[str, Any], root: str) -> Optional[List[LinkRecord]]:
        query = body.get("query")
        if not isinstance(query, Mapping) or not isinstance(query.get("entries"), list):
            return None
        return self._link_shaped(query["entries"], root)

    def _from_aggregate(self, body: Mapping[str, Any], root: str) -> Optional[List[LinkRecord]]:
        if len(body) != 1:
            return None

        structure, value = next(iter(body.items()))
        if isinstance(value, Mapping):
            elements = [value]
        elif isinstance(value, list):
            elements = value
        else:
            return None

        records: List[LinkRecord] = []
        for element in elements:
            if not isinstance(element, Mapping):
                raise UnparseableResource(root, [structure])
            # {"project": {"links": ..., "meta": ...}} carries the type in the structure key
            if "links" in element or "meta" in element:
                typed = {structure: element}
            else:
                typed = element
            for type_name, obj in typed.items():
                if not isinstance(obj, Mapping):
                    raise UnparseableResource(root, [structure])
                records.extend(self._element_links(structure, type_name, obj, root))
        return records

    def _element_links(
        self,
        structure: str,
        type_name: str,
        obj: Mapping[str, Any],
        root: str,
    ) -> List[LinkRecord]:
        links = obj.get("links") or {}
        meta = obj.get("meta")
        if not isinstance(links, Mapping):
            raise UnparseableResource(root, [structure])

        records: List[LinkRecord] = []
        element_root = root
        skip_self = False
        if "self" in links and isinstance(meta, Mapping):
            element_root = absolute_uri(self._uri(links["self"], root), root)
            attributes: Dict[str, Any] = dict(meta)
            attributes["category"] = type_name
            attributes["structure"] = structure
            records.append(LinkRecord(link=element_root, attributes=attributes))
            skip_self = True

        for key, uri in links.items():
            if skip_self and key == "self":
                continue
            records.append(LinkRecord(
                link=absolute_uri(self._uri(uri, root), element_root),
                attributes={"structure": structure, "category": key, "type": type_name},
            ))
        return records

    def _link_shaped(self, entries: List[Any], root: str) -> List[LinkRecord]:
        records = []
        for entry in entries:
            if not isinstance(entry, Mapping) or "link" not in entry:
                raise UnparseableResource(root, ["link"])
            records.append(LinkRecord.from_mapping(entry).resolved_against(root))
        return records

    @staticmethod
    def _uri(value: Any, root: str) -> str:
        if not isinstance(value, str):
            raise UnparseableResource(root, ["links"])
        return value
