"""Link cache infrastructure package."""

from .link_cache import LinkCache

__all__ = ['LinkCache']
