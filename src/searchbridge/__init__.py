"""SearchBridge — Doofinder product-search adapter.

Translates a generic product-search request (offset/limit window, filters,
sort token) into Doofinder queries, and maps Doofinder responses back into
product identifiers, filter descriptions and search suggestions.
"""

__version__ = "0.1.0"
