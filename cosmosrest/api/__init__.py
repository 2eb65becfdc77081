"""High-level API facades."""

from .client import CosmosClient
from .endpoints import ENDPOINTS, get_endpoint

__all__ = ["CosmosClient", "ENDPOINTS", "get_endpoint"]
