"""
pxshot - Python client for the Pxshot screenshot API.

Usage:
    from pxshot import Client, ScreenshotOptions, Format

    client = Client("px_live_...")
    result = client.screenshot(ScreenshotOptions(url="https://example.com", format=Format.PNG))
    if result.is_stored():
        print(result.url)
    else:
        result.save("example.png")
"""

__version__ = "1.0.0"

from .errors import ErrorKind, PxshotError, ValidationError, HttpError, ApiError
from .config import ClientConfig, PxshotSettings
from .interfaces import (
    Format,
    WaitUntil,
    ScreenshotOptions,
    StoredScreenshot,
    ScreenshotResult,
    BytesResult,
    StoredResult,
    Usage,
)
from .transport import HttpResponse, TransportError, RequestsTransport, AiohttpTransport
from .client import Client
from .async_client import AsyncClient
from .logging import setup_logger, configure_logging

__all__ = [
    'ErrorKind',
    'PxshotError',
    'ValidationError',
    'HttpError',
    'ApiError',
    'ClientConfig',
    'PxshotSettings',
    'Format',
    'WaitUntil',
    'ScreenshotOptions',
    'StoredScreenshot',
    'ScreenshotResult',
    'BytesResult',
    'StoredResult',
    'Usage',
    'HttpResponse',
    'TransportError',
    'RequestsTransport',
    'AiohttpTransport',
    'Client',
    'AsyncClient',
    'setup_logger',
    'configure_logging',
    '__version__',
]
