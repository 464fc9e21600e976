"""Base adapter interface — Abstract classes for product search connectors."""

from searchbridge.adapters.base.adapter import ProductSearchAdapter

__all__ = ["ProductSearchAdapter"]
