"""
GoodData Client - navigate the GoodData hypermedia REST API by following links.
"""

__version__ = "1.0.0"
__author__ = "GoodData Client Team"

__all__ = [
    "GoodDataClient",
    "GoodDataAgent",
    "LinkCache",
    "LinkResolver",
    "Poller",
]

# Lazy attribute access to avoid importing requests/pydantic at package import time.
def __getattr__(name: str):  # pragma: no cover - simple lazy loader
    if name == "GoodDataClient":
        from .application.gooddata_service import GoodDataClient as _C
        return _C
    if name == "GoodDataAgent":
        from .infrastructure.http.agent import GoodDataAgent as _A
        return _A
    if name == "LinkCache":
        from .infrastructure.cache.link_cache import LinkCache as _LC
        return _LC
    if name == "LinkResolver":
        from .domain.services.resolver import LinkResolver as _R
        return _R
    if name == "Poller":
        from .domain.services.poller import Poller as _P
        return _P
    raise AttributeError(f"module 'gooddata_client' has no attribute {name!r}")
