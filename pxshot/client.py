"""
Blocking client for the Pxshot screenshot API.

Usage:
    from pxshot import Client, ScreenshotOptions

    with Client("px_live_...") as client:
        result = client.screenshot(ScreenshotOptions(url="https://example.com"))
        result.save("example.png")
"""

import json
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError as SchemaError

from . import __version__
from .config import ClientConfig, PxshotSettings
from .errors import ApiError, HttpError, PxshotError, ValidationError
from .interfaces.screenshot import BytesResult, ScreenshotOptions, ScreenshotResult, StoredResult, StoredScreenshot
from .interfaces.usage import Usage
from .logging import setup_logger
from .transport import HttpResponse, RequestsTransport, TransportError

# Set up logger
logger = setup_logger(__name__)

SCREENSHOT_PATH = "/v1/screenshot"
USAGE_PATH = "/v1/usage"


def make_config(config: Union[str, ClientConfig]) -> ClientConfig:
    """Normalize a bare API key or a full configuration, rejecting an empty key."""
    if isinstance(config, str):
        config = ClientConfig(api_key=config)
    if not config.api_key:
        raise ValidationError("API key is required")
    return config


def make_headers(config: ClientConfig, json_content: bool = True) -> Dict[str, str]:
    headers = {"Authorization": f"Bearer {config.api_key}"}
    if json_content:
        headers["Content-Type"] = "application/json"
    headers["User-Agent"] = config.user_agent or f"pxshot-python/{__version__}"
    return headers


def endpoint(config: ClientConfig, path: str) -> str:
    return f"{config.base_url.rstrip('/')}{path}"


def validate_options(options: ScreenshotOptions) -> None:
    """Check screenshot options before any request is sent.

    Raises:
        ValidationError: If a field is missing or out of range
    """
    if not options.url:
        raise ValidationError("URL is required")
    if options.quality is not None and not 0 <= options.quality <= 100:
        raise ValidationError("Quality must be between 0 and 100")
    if options.width is not None and options.width <= 0:
        raise ValidationError("Width must be positive")
    if options.height is not None and options.height <= 0:
        raise ValidationError("Height must be positive")


def encode_options(options: ScreenshotOptions) -> bytes:
    return json.dumps(options.to_payload()).encode("utf-8")


def check_response(response: HttpResponse, context: str) -> None:
    """Raise ApiError or HttpError for a response with status >= 400."""
    if response.status_code < 400:
        return

    try:
        body = json.loads(response.content)
    except ValueError:
        body = None

    if not isinstance(body, dict):
        logger.error(f"{context}: HTTP {response.status_code}")
        raise HttpError(response.status_code, f"{context}: HTTP {response.status_code}")

    code = str(body.get("code", "unknown"))
    message = str(body.get("message", response.text))
    logger.error(f"{context}: HTTP {response.status_code} {code}: {message}")
    raise ApiError(code, message, status_code=response.status_code)


def parse_screenshot(response: HttpResponse, store: bool) -> ScreenshotResult:
    """Turn a successful screenshot response into a BytesResult or StoredResult.

    The body is read as stored-screenshot JSON when storage was requested or
    the server labels it as JSON. Anything else is image data, kept as is.
    """
    is_json = "application/json" in response.header("Content-Type")

    if store or is_json:
        try:
            stored = StoredScreenshot.model_validate_json(response.content)
        except SchemaError as e:
            raise PxshotError(f"Failed to parse stored screenshot response: {e}") from e
        logger.debug(f"Screenshot stored at {stored.url} ({stored.size_bytes} bytes)")
        return StoredResult(stored)

    logger.debug(f"Screenshot returned inline ({len(response.content)} bytes)")
    return BytesResult(response.content)


def parse_usage(response: HttpResponse) -> Usage:
    try:
        return Usage.model_validate_json(response.content)
    except SchemaError as e:
        raise PxshotError(f"Failed to parse usage response: {e}") from e


class Client:
    """Pxshot API client.

    Each call issues a single HTTP request and blocks until it completes or
    the configured timeout expires. Nothing is retried.
    """

    def __init__(self, config: Union[str, ClientConfig], transport: Optional[Any] = None):
        """Initialize the client.

        Args:
            config: API key, or a full ClientConfig
            transport: Optional transport, defaults to RequestsTransport

        Raises:
            ValidationError: If the API key is empty
        """
        self._config = make_config(config)
        self._transport = transport or RequestsTransport(timeout=self._config.timeout)
        logger.debug(f"Initialized Client with base_url: {self._config.base_url}")

    @classmethod
    def from_env(cls, transport: Optional[Any] = None) -> "Client":
        """Build a client from PXSHOT_* environment variables or a .env file."""
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

    def screenshot(self, options: ScreenshotOptions) -> ScreenshotResult:
        """Capture a screenshot.

        Args:
            options: Screenshot configuration

        Returns:
            BytesResult with the image, or StoredResult when the API stored it

        Raises:
            ValidationError: On invalid options, before any request is sent
            ApiError: If the API returned an error body
            HttpError: On network failure (status 0) or unreadable HTTP errors
            PxshotError: If a stored-screenshot body is malformed
        """
        validate_options(options)
        url = endpoint(self._config, SCREENSHOT_PATH)
        logger.debug(f"Sending screenshot request to: {url} for {options.url}")

        response = self._send("POST", url, "Screenshot request failed", body=encode_options(options))
        return parse_screenshot(response, bool(options.store))

    def usage(self) -> Usage:
        """Get usage statistics for the current billing period.

        Raises:
            ApiError: If the API returned an error body
            HttpError: On network failure (status 0) or unreadable HTTP errors
            PxshotError: If the body is malformed
        """
        url = endpoint(self._config, USAGE_PATH)
        logger.debug(f"Sending usage request to: {url}")

        response = self._send("GET", url, "Usage request failed")
        return parse_usage(response)

    def _send(self, method: str, url: str, context: str, body: Optional[bytes] = None) -> HttpResponse:
        try:
            response = self._transport.request(
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

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if close:
            close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
