"""Doofinder adapter package."""

from searchbridge.adapters.doofinder.adapter import DoofinderAdapter
from searchbridge.adapters.doofinder.transport import HttpxTransport

__all__ = ["DoofinderAdapter", "HttpxTransport"]
