"""
remote_retry - Transient Error Adapters.

Per-transport rules deciding which failures are retried.
"""

from .base import TransientErrorAdapter, PredicateAdapter
from .http import HttpTransientErrorAdapter
from .rpc import RpcTransientErrorAdapter

__all__ = [
    "TransientErrorAdapter",
    "PredicateAdapter",
    "HttpTransientErrorAdapter",
    "RpcTransientErrorAdapter",
]
