"""
Core interfaces package.

Contains the abstract HTTP client the ApiAxle client is built on.
"""

from .base_api_client import BaseAPIClient, RequestMethod

__all__ = [
    "BaseAPIClient",
    "RequestMethod",
]
