"""
API module: FastAPI REST surface and its HTTP client.
"""

from .rest_api import CCRMRestAPI
from .client import CCRMClient, CCRMClientError

__all__ = [
    "CCRMRestAPI",
    "CCRMClient",
    "CCRMClientError",
]
