"""
remote_retry - Clients.

Transport clients running their calls through the retry engine.
"""

from .base import BaseClient
from .http import HttpClient, raise_for_status

__all__ = [
    "BaseClient",
    "HttpClient",
    "raise_for_status",
]
