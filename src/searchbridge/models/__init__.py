"""Pydantic models shared by the adapter, the core translators and the SDK."""
