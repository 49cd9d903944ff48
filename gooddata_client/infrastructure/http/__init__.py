"""HTTP transport infrastructure package."""

from .agent import GoodDataAgent

__all__ = ['GoodDataAgent']
