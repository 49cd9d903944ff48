"""
Domain models for hypermedia links.
Pure data with no HTTP dependencies: descriptors, resolved link records and URI helpers.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Union
from urllib.parse import urljoin, urlsplit, urlunsplit


# Open attribute bag (category, type, structure, identifier, title, ...).
# The server vocabulary is not closed, so no keys are fixed here.
LinkDescriptor = Dict[str, Any]

# What callers may pass as one path element: a descriptor or a bare category.
PathElement = Union[str, Mapping[str, Any]]

_DEFAULT_PORTS = {"http": "80", "https": "443"}


def as_descriptor(element: PathElement) -> LinkDescriptor:
    """Expand a path element; a plain string is shorthand for ``{"category": element}``."""
    if isinstance(element, str):
        return {"category": element}
    if isinstance(element, Mapping):
        return dict(element)
    raise TypeError(f"Path element must be a string or a mapping, not {type(element).__name__}")


def absolute_uri(link: str, root: str) -> str:
    """Resolve ``link`` against the resource root it was discovered under."""
    return urljoin(root, link)


def canonical_uri(uri: str) -> str:
    """Canonical form used to compare resource roots.

    Lowercases scheme and authority, drops default ports and the fragment, and
    gives an empty path on an absolute URI the root path.
    """
    p = urlsplit(uri)
    scheme = p.scheme.lower()
    netloc = p.netloc.lower()
    default_port = _DEFAULT_PORTS.get(scheme)
    if default_port and netloc.endswith(f":{default_port}"):
        netloc = netloc.rsplit(":", 1)[0]
    path = p.path
    if netloc and not path:
        path = "/"
    return urlunsplit((scheme, netloc, path, p.query, ""))


def looks_like_uri(value: Any) -> bool:
    """Tell a root URI apart from a bare category in the first path element."""
    return isinstance(value, str) and (value.startswith("/") or "://" in value)


@dataclass(frozen=True)
class LinkRecord:
    """One link discovered in a resource: a URI plus the attributes describing it."""
    link: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Cached records are shared between callers, so attributes are read-only
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash((self.link, frozenset(self.attributes)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LinkRecord:
        """Create a record from a link-shaped object such as ``{"category": ..., "link": ...}``."""
        attributes = {k: v for k, v in data.items() if k != "link"}
        return cls(link=str(data["link"]), attributes=attributes)

    def get(self, key: str, default: Any = None) -> Any:
        if key == "link":
            return self.link
        return self.attributes.get(key, default)

    def __getitem__(self, key: str) -> Any:
        if key == "link":
            return self.link
        return self.attributes[key]

    def __contains__(self, key: object) -> bool:
        return key == "link" or key in self.attributes

    def __iter__(self) -> Iterator[str]:
        yield from self.attributes
        yield "link"

    def matches(self, descriptor: Mapping[str, Any]) -> bool:
        """True when every key of ``descriptor`` is present here with an equal value.

        Values compare as strings, so ``{"identifier": 42}`` matches ``"42"``.
        """
        for key, value in descriptor.items():
            if key not in self:
                return False
            if str(self[key]) != str(value):
                return False
        return True

    def resolved_against(self, root: str) -> LinkRecord:
        """Return a copy whose link is absolute with respect to ``root``."""
        resolved = absolute_uri(self.link, root)
        if resolved == self.link:
            return self
        return replace(self, link=resolved)

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.attributes)
        data["link"] = self.link
        return data
