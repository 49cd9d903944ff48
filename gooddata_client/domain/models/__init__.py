"""Domain models package."""

from .link import LinkDescriptor, LinkRecord, as_descriptor, canonical_uri, absolute_uri
from .polling import PollTask, PollTimeout, POLL_TIMEOUT

__all__ = [
    "LinkDescriptor",
    "LinkRecord",
    "as_descriptor",
    "canonical_uri",
    "absolute_uri",
    "PollTask",
    "PollTimeout",
    "POLL_TIMEOUT",
]
