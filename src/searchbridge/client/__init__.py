"""SearchBridge Python SDK — Synchronous access to the Doofinder adapter.

Quick start::

    from searchbridge.client import DoofinderClient
    from searchbridge.config.settings import Settings

    client = DoofinderClient(Settings())
    result = client.search_products("running shoes", limit=20)
    print(result.product_ids)
"""

from searchbridge.client.client import DoofinderClient

__all__ = ["DoofinderClient"]
