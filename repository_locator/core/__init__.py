"""Core building blocks shared across repository_locator."""

from .registry import Registry

__all__ = ["Registry"]
