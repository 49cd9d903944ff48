"""Domain services package."""

from .normalizer import ResponseNormalizer
from .resolver import LinkResolver
from .poller import Poller

__all__ = [
    "ResponseNormalizer",
    "LinkResolver",
    "Poller",
]
