"""
HTTP client with retry.
"""

import logging
from typing import Any

import httpx

from .base import BaseClient
from ..adapters import HttpTransientErrorAdapter
from ..exceptions import ApiResponseError
from ..retry import RetryPolicy

logger = logging.getLogger(__name__)


def raise_for_status(response: httpx.Response) -> None:
    """Convert an error response into an `ApiResponseError`."""
    if response.is_success:
        return
    message = response.reason_phrase or "API request failed"
    grpc_code = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error") or message
        grpc_code = body.get("code")
    raise ApiResponseError(
        str(message),
        status_code=response.status_code,
        grpc_status_code=grpc_code if isinstance(grpc_code, int) else None,
    )


class HttpClient(BaseClient):
    """
    Client for a JSON-over-HTTP API.

    Features:
    - 500 and 503 responses retried with exponential backoff and jitter
    - Per-call retry policy overriding the global one
    - Bearer token authentication
    """

    def __init__(
        self,
        base_url: str,
        global_retry_policy: RetryPolicy | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: API base URL
            global_retry_policy: Default retry policy
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. for tests
        """
        super().__init__(HttpTransientErrorAdapter(), global_retry_policy)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def transport_name(self) -> str:
        return "HTTP"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    def _get_headers(self, token: str | None) -> dict:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        seed: str,
        json: Any = None,
        token: str | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> Any:
        """
        Send a request, retrying transient failures.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            seed: Session token or id seeding the retry jitter
            json: Optional JSON body
            token: Optional bearer token
            retry_policy: Policy for this call only

        Returns:
            The decoded JSON body, or None for an empty body
        """
        url = f"{self.base_url}/{path.lstrip('/')}"

        async def send() -> Any:
            async with self._client() as client:
                response = await client.request(
                    method, url, headers=self._get_headers(token), json=json
                )
            raise_for_status(response)
            return response.json() if response.content else None

        logger.debug(f"[{self.transport_name}] {method} {url}")
        return await self.invoke_with_retry(send, seed, retry_policy)

    async def health_check(self) -> bool:
        """Check if the API answers at `/healthcheck` on the host root."""
        try:
            async with self._client() as client:
                url = httpx.URL(self.base_url).join("/healthcheck")
                response = await client.get(url)
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.debug(f"[{self.transport_name}] Health check failed: {e}")
            return False
