"""Shared HTTP client for the generation endpoints."""

from pathlib import Path
from typing import Any

import httpx

from video_producer.config import settings
from video_producer.logging import get_logger

logger = get_logger(__name__)


class ProducerAPIClient:
    """JSON client for the producer backend.

    A fresh ``httpx.AsyncClient`` is opened per call. ``transport`` lets tests
    plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.producer_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.producer_api_timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def post_json(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON body and return the decoded JSON response.

        Raises:
            httpx.HTTPStatusError: On a non-2xx response.
            httpx.RequestError: On connection problems.
        """
        async with self._client() as client:
            response = await client.post(path, json=payload)
            response.raise_for_status()
            return response.json()

    async def download(self, path: str, destination: Path) -> int:
        """Stream a binary response to ``destination``. Returns bytes written."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        written = 0
        async with self._client() as client:
            async with client.stream("GET", path) as response:
                response.raise_for_status()
                with destination.open("wb") as f:
                    async for chunk in response.aiter_bytes():
                        f.write(chunk)
                        written += len(chunk)
        return written

    async def health_check(self) -> bool:
        try:
            async with self._client() as client:
                response = await client.get("/health")
                return response.status_code < 500
        except httpx.HTTPError as e:
            logger.error("producer_api_health_check_failed", error=str(e))
            return False


def describe_error(exc: Exception) -> str:
    """Human-readable message for an HTTP failure."""
    if isinstance(exc, httpx.HTTPStatusError):
        message = f"API error: {exc.response.status_code}"
        try:
            data = exc.response.json()
        except ValueError:
            return message
        detail = data.get("error") or data.get("message") if isinstance(data, dict) else None
        return f"{message} - {detail or data}"
    if isinstance(exc, httpx.TimeoutException):
        return "API timeout"
    return str(exc) or exc.__class__.__name__
