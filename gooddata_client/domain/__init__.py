"""Domain layer - link model, resolution and polling with no HTTP dependencies."""

from .models.link import LinkDescriptor, LinkRecord, as_descriptor, canonical_uri, absolute_uri
from .models.polling import PollTask, PollTimeout, POLL_TIMEOUT
from .errors import (
    GoodDataError,
    ResolutionError,
    NonexistentComponent,
    AmbiguousPath,
    UnparseableResource,
    TransportError,
    OperationTimeout,
    OperationFailed,
)

__all__ = [
    "LinkDescriptor",
    "LinkRecord",
    "as_descriptor",
    "canonical_uri",
    "absolute_uri",
    "PollTask",
    "PollTimeout",
    "POLL_TIMEOUT",
    "GoodDataError",
    "ResolutionError",
    "NonexistentComponent",
    "AmbiguousPath",
    "UnparseableResource",
    "TransportError",
    "OperationTimeout",
    "OperationFailed",
]
