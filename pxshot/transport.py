"""
HTTP transports used by the Pxshot clients.

A transport performs exactly one HTTP exchange per call and returns the
status, headers and raw body. It raises TransportError when the exchange
could not be completed (connection failure, timeout). Anything with a
matching ``request`` method can be passed to a client instead.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

import aiohttp
import requests


class TransportError(Exception):
    """The HTTP exchange did not complete."""


@dataclass
class HttpResponse:
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""

    def __post_init__(self):
        self.headers = {k.lower(): v for k, v in dict(self.headers).items()}

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class RequestsTransport:
    """Blocking transport backed by a requests session."""

    def __init__(self, timeout: float, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> HttpResponse:
        try:
            response = self.session.request(
                method,
                url,
                headers=dict(headers),
                data=body,
                timeout=(self.timeout, self.timeout),
                allow_redirects=True,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(str(e) or type(e).__name__) from e
        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
        )

    def close(self) -> None:
        self.session.close()


class AiohttpTransport:
    """Asyncio transport backed by an aiohttp session.

    The session is created lazily on first use, inside the running loop.
    """

    def __init__(self, timeout: float, session: Optional[aiohttp.ClientSession] = None):
        self.timeout = timeout
        self.session = session

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        body: Optional[bytes] = None,
    ) -> HttpResponse:
        if not self.session:
            self.session = aiohttp.ClientSession()
        timeout = aiohttp.ClientTimeout(connect=self.timeout, sock_read=self.timeout)
        try:
            async with self.session.request(
                method,
                url,
                headers=dict(headers),
                data=body,
                timeout=timeout,
                allow_redirects=True,
            ) as response:
                content = await response.read()
                return HttpResponse(
                    status_code=response.status,
                    headers=dict(response.headers),
                    content=content,
                )
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timed out after {self.timeout}s") from e
        except aiohttp.ClientError as e:
            raise TransportError(str(e) or type(e).__name__) from e

    async def close(self) -> None:
        if self.session:
            await self.session.close()
            self.session = None
