"""Search adapter layer — Connectors for product search providers.

Built-in adapters:
  - doofinder: Doofinder Search API v5 (paged search, facets, suggestions)

Implement ``ProductSearchAdapter`` to connect another provider.
"""
