"""Multikey encoding for did:key."""

from . import curves, errors, multi_key, plugins

__all__ = ["curves", "errors", "multi_key", "plugins"]
