"""
Error taxonomy for link resolution, normalization, transport and asynchronous operations.
"""

from __future__ import annotations
from typing import Any, List, Mapping, Optional, Sequence


class GoodDataError(Exception):
    """Base class for all errors raised by this package."""


class ResolutionError(GoodDataError):
    """A path of descriptors could not be followed."""

    def __init__(self, message: str, descriptor: Mapping[str, Any], root: str):
        super().__init__(message)
        self.descriptor = dict(descriptor)
        self.root = root


class NonexistentComponent(ResolutionError):
    """An intermediate descriptor matched no link."""

    def __init__(self, descriptor: Mapping[str, Any], root: str):
        super().__init__(f"No link matching {dict(descriptor)!r} under {root}", descriptor, root)


class AmbiguousPath(ResolutionError):
    """An intermediate descriptor matched more than one link.

    Add a discriminating attribute (``identifier``, ``title``, ...) to the descriptor.
    """

    def __init__(self, descriptor: Mapping[str, Any], root: str, candidates: Sequence[Any] = ()):
        super().__init__(
            f"{len(candidates)} links match {dict(descriptor)!r} under {root}",
            descriptor,
            root,
        )
        self.candidates = list(candidates)


class UnparseableResource(GoodDataError):
    """A resource body has none of the recognized link-bearing shapes."""

    def __init__(self, root: str, keys: Optional[List[str]] = None):
        detail = f" (top-level keys: {', '.join(keys)})" if keys else ""
        super().__init__(f"Do not know how to find links in {root}{detail}")
        self.root = root
        self.keys = list(keys or [])


class TransportError(GoodDataError):
    """An HTTP request failed, either at network level or with an error status."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        uri: Optional[str] = None,
        parameters: Optional[Sequence[Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.reason = reason
        self.uri = uri
        self.parameters = list(parameters or [])

    @property
    def status_line(self) -> str:
        if self.status is None:
            return ""
        return f"{self.status} {self.reason or ''}".strip()


class OperationTimeout(GoodDataError):
    """An asynchronous operation did not finish within its poll budget."""

    def __init__(self, uri: str, attempts: int):
        super().__init__(f"Gave up waiting for {uri} after {attempts} observations")
        self.uri = uri
        self.attempts = attempts


class OperationFailed(GoodDataError):
    """An asynchronous operation finished in an error state."""

    def __init__(self, uri: str, state: str, body: Any = None):
        super().__init__(f"Operation at {uri} finished in state {state}")
        self.uri = uri
        self.state = state
        self.body = body
