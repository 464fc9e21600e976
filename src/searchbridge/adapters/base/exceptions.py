"""Adapter-specific exceptions."""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter cannot reach the search provider."""


class QueryError(AdapterError):
    """Raised when a search request cannot be translated into a provider query."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""


class ProviderContractError(AdapterError):
    """Raised when a provider response does not have the expected structure."""
