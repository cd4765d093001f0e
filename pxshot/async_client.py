"""
Asyncio client for the Pxshot screenshot API.

Usage:
    async with AsyncClient("px_live_...") as client:
        usage = await client.usage()
"""

from typing import Any, Optional, Union

from . import __version__
from .client import (
    SCREENSHOT_PATH,
    USAGE_PATH,
    encode_options,
    endpoint,
    check_response,
    make_config,
    make_headers,
    parse_screenshot,
    parse_usage,
    validate_options,
)
from .config import ClientConfig, PxshotSettings
from .errors import HttpError
from .interfaces.screenshot import ScreenshotOptions, ScreenshotResult
from .interfaces.usage import Usage
from .logging import setup_logger
from .transport import AiohttpTransport, HttpResponse, TransportError

logger = setup_logger(__name__)


class AsyncClient:
    """Async counterpart of Client, backed by aiohttp by default."""

    def __init__(self, config: Union[str, ClientConfig], transport: Optional[Any] = None):
        """Initialize the client.

        Args:
            config: API key, or a full ClientConfig
            transport: Optional async transport, defaults to AiohttpTransport

        Raises:
            ValidationError: If the API key is empty
        """
        self._config = make_config(config)
        self._transport = transport or AiohttpTransport(timeout=self._config.timeout)
        logger.debug(f"Initialized AsyncClient with base_url: {self._config.base_url}")

    @classmethod
    def from_env(cls, transport: Optional[Any] = None) -> "AsyncClient":
        return cls(PxshotSettings().to_client_config(), transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @staticmethod
    def version() -> str:
        return __version__

    async def __aenter__(self):
        """Enter async context."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.close()

    async def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close:
            await close()
            logger.debug("Closed transport")

    async def screenshot(self, options: ScreenshotOptions) -> ScreenshotResult:
        """Capture a screenshot. Same contract as Client.screenshot()."""
        validate_options(options)
        url = endpoint(self._config, SCREENSHOT_PATH)
        logger.debug(f"Sending screenshot request to: {url} for {options.url}")

        response = await self._send("POST", url, "Screenshot request failed", body=encode_options(options))
        return parse_screenshot(response, bool(options.store))

    async def usage(self) -> Usage:
        """Get usage statistics for the current billing period."""
        url = endpoint(self._config, USAGE_PATH)
        logger.debug(f"Sending usage request to: {url}")

        response = await self._send("GET", url, "Usage request failed")
        return parse_usage(response)

    async def _send(self, method: str, url: str, context: str, body: Optional[bytes] = None) -> HttpResponse:
        try:
            response = await self._transport.request(
                method,
                url,
                headers=make_headers(self._config, json_content=body is not None),
                body=body,
            )
        except TransportError as e:
            logger.error(f"{context}: {e}")
            raise HttpError(0, f"{context}: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        check_response(response, context)
        return response
