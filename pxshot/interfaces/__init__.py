"""
API interfaces (DTOs) for the Pxshot service.
"""

from .screenshot import (
    Format,
    WaitUntil,
    ScreenshotOptions,
    StoredScreenshot,
    ScreenshotResult,
    BytesResult,
    StoredResult,
)
from .usage import Usage

__all__ = [
    'Format',
    'WaitUntil',
    'ScreenshotOptions',
    'StoredScreenshot',
    'ScreenshotResult',
    'BytesResult',
    'StoredResult',
    'Usage',
]
