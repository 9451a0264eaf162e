"""
Transient error adapter for RPC channels.
"""

from .base import TransientErrorAdapter
from ..exceptions import RpcError, TRANSIENT_RPC_CODES

TRANSIENT_CODE_NAMES = frozenset(code.name for code in TRANSIENT_RPC_CODES)


class RpcTransientErrorAdapter(TransientErrorAdapter):
    """
    Treats INTERNAL and UNAVAILABLE statuses as transient.

    Besides `RpcError`, any error exposing a gRPC-style `code()` method
    (such as `grpc.RpcError` raised by a call) is recognized by the status
    name it returns. Other RPC `TransportError`s are transient when
    flagged `retryable`.
    """

    @property
    def transport_name(self) -> str:
        return "rpc"

    def is_transient(self, error: BaseException) -> bool:
        if isinstance(error, RpcError):
            return error.code in TRANSIENT_RPC_CODES
        if self.is_flagged_retryable(error):
            return True
        code = getattr(error, "code", None)
        if not callable(code):
            return False
        status = code()
        return getattr(status, "name", None) in TRANSIENT_CODE_NAMES
