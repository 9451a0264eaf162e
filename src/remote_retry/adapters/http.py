"""
Transient error adapter for HTTP transports.
"""

import httpx

from .base import TransientErrorAdapter
from ..exceptions import ApiResponseError, TRANSIENT_HTTP_STATUSES


class HttpTransientErrorAdapter(TransientErrorAdapter):
    """
    Treats 500 and 503 responses as transient.

    Any other HTTP `TransportError` is transient when it is flagged `retryable`.
    """

    def __init__(self, transient_statuses: frozenset[int] = TRANSIENT_HTTP_STATUSES):
        self.transient_statuses = frozenset(transient_statuses)

    @property
    def transport_name(self) -> str:
        return "http"

    def is_transient(self, error: BaseException) -> bool:
        if isinstance(error, ApiResponseError):
            return error.status_code in self.transient_statuses
        if isinstance(error, httpx.HTTPStatusError):
            return error.response.status_code in self.transient_statuses
        return self.is_flagged_retryable(error)
