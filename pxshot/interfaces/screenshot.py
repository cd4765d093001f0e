"""
API interfaces (DTOs) for the screenshot endpoint.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors import PxshotError


class Format(str, Enum):
    """Image format for screenshots."""

    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"


class WaitUntil(str, Enum):
    """When to consider navigation complete."""

    LOAD = "load"
    DOM_CONTENT_LOADED = "domcontentloaded"
    NETWORK_IDLE = "networkidle"  # no network activity for 500ms
    COMMIT = "commit"  # first network response


class ScreenshotOptions(BaseModel):
    """Screenshot request options.

    Only ``url`` is required. Fields left as ``None`` are not sent, so the
    API applies its own defaults for them.
    """

    model_config = ConfigDict(validate_assignment=True)

    url: str = Field(..., description="URL to capture")
    format: Optional[Format] = Field(default=None, description="Image format (API default: png)")
    quality: Optional[int] = Field(default=None, description="JPEG/WEBP quality 0-100")
    width: Optional[int] = Field(default=None, description="Viewport width")
    height: Optional[int] = Field(default=None, description="Viewport height")
    full_page: Optional[bool] = Field(default=None, description="Capture full scrollable page")
    wait_until: Optional[WaitUntil] = Field(default=None, description="Navigation wait condition")
    wait_for_selector: Optional[str] = Field(default=None, description="Wait for CSS selector")
    wait_for_timeout: Optional[int] = Field(default=None, description="Additional wait in ms")
    device_scale_factor: Optional[float] = Field(default=None, description="Device pixel ratio")
    store: Optional[bool] = Field(default=None, description="Store and return URL")
    block_ads: Optional[bool] = Field(default=None, description="Block ads and trackers")

    def to_payload(self) -> Dict[str, Any]:
        """Request body for the screenshot endpoint, without unset fields."""
        return self.model_dump(mode="json", exclude_none=True)


class StoredScreenshot(BaseModel):
    """Screenshot persisted by the API, returned when store=True."""

    model_config = ConfigDict(frozen=True, strict=True)

    url: str
    expires_at: str
    width: int
    height: int
    size_bytes: int


class ScreenshotResult:
    """Result of a screenshot call: either a BytesResult or a StoredResult.

    Prefer branching on the concrete type::

        if isinstance(result, StoredResult):
            print(result.screenshot.url)
        else:
            image = result.take_bytes()

    The accessors below raise PxshotError when called on the wrong variant.
    """

    __slots__ = ()

    def is_bytes(self) -> bool:
        return False

    def is_stored(self) -> bool:
        return False

    def stored(self) -> StoredScreenshot:
        raise PxshotError("Screenshot was not stored - use bytes() instead")

    def take_bytes(self) -> bytes:
        raise PxshotError("Screenshot was stored - use stored() instead")

    def save(self, filepath: str) -> None:
        """Write the image bytes to a file."""
        data = self.bytes()
        with open(filepath, "wb") as f:
            f.write(data)

    @property
    def url(self) -> str:
        return self.stored().url

    @property
    def expires_at(self) -> str:
        return self.stored().expires_at

    @property
    def width(self) -> int:
        return self.stored().width

    @property
    def height(self) -> int:
        return self.stored().height

    @property
    def size_bytes(self) -> int:
        return self.stored().size_bytes

    def bytes(self) -> bytes:
        raise PxshotError("Screenshot was stored - use stored() instead")


class BytesResult(ScreenshotResult):
    """Raw image data returned inline by the API."""

    __slots__ = ("_data",)
    __match_args__ = ("data",)

    def __init__(self, data: bytes):
        self._data: Optional[bytes] = data

    def is_bytes(self) -> bool:
        return True

    @property
    def consumed(self) -> bool:
        """True once take_bytes() has moved the buffer out."""
        return self._data is None

    @property
    def data(self) -> bytes:
        return self.bytes()

    def take_bytes(self) -> bytes:
        """Move the image bytes out of the result.

        Later calls to bytes() or take_bytes() raise PxshotError.
        """
        data = self.bytes()
        self._data = None
        return data

    def __repr__(self) -> str:
        if self._data is None:
            return "BytesResult(<consumed>)"
        return f"BytesResult({len(self._data)} bytes)"

    def bytes(self) -> bytes:
        if self._data is None:
            raise PxshotError("Screenshot bytes were already taken")
        return self._data


class StoredResult(ScreenshotResult):
    """Metadata of a screenshot stored by the API."""

    __slots__ = ("screenshot",)
    __match_args__ = ("screenshot",)

    def __init__(self, screenshot: StoredScreenshot):
        self.screenshot = screenshot

    def is_stored(self) -> bool:
        return True

    def stored(self) -> StoredScreenshot:
        return self.screenshot

    def __repr__(self) -> str:
        return f"StoredResult({self.screenshot!r})"
