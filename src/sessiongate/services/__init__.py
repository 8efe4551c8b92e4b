"""Client services."""

from .api_client import AuthenticatedApiClient

__all__ = ["AuthenticatedApiClient"]
