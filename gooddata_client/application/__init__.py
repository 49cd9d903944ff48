"""Application layer - wrapper operations built on the resolver, transport and poller."""

from .gooddata_service import GoodDataClient

__all__ = [
    "GoodDataClient"
]
