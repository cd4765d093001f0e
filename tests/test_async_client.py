import pytest

from pxshot import ApiError, AsyncClient, Client, HttpError, HttpResponse, ScreenshotOptions, ValidationError

from .stubs import PNG_BYTES, STORED_PAYLOAD, USAGE_PAYLOAD, json_response


@pytest.mark.asyncio
async def test_validation_happens_before_the_request(config, async_transport):
    async with AsyncClient(config, transport=async_transport) as client:
        with pytest.raises(ValidationError):
            await client.screenshot(ScreenshotOptions(url="https://example.com", quality=150))
    assert async_transport.calls == []
    assert async_transport.closed


@pytest.mark.asyncio
async def test_bytes_and_stored_results(config, async_transport):
    client = AsyncClient(config, transport=async_transport)

    async_transport.response = HttpResponse(status_code=200, headers={"Content-Type": "image/png"}, content=PNG_BYTES)
    result = await client.screenshot(ScreenshotOptions(url="https://example.com"))
    assert result.bytes() == PNG_BYTES

    async_transport.response = json_response(200, STORED_PAYLOAD)
    result = await client.screenshot(ScreenshotOptions(url="https://example.com", store=True))
    assert result.stored().size_bytes == 12345
    assert async_transport.calls[1].json() == {"url": "https://example.com", "store": True}


@pytest.mark.asyncio
async def test_errors(config, async_transport):
    client = AsyncClient(config, transport=async_transport)

    async_transport.response = json_response(402, {"code": "quota_exceeded", "message": "limit reached"})
    with pytest.raises(ApiError) as exc_info:
        await client.usage()
    assert exc_info.value.error_code == "quota_exceeded"

    async_transport.error = "timed out"
    with pytest.raises(HttpError) as http_info:
        await client.usage()
    assert http_info.value.status_code == 0


@pytest.mark.asyncio
async def test_usage(config, async_transport):
    async_transport.response = json_response(200, USAGE_PAYLOAD)
    usage = await AsyncClient(config, transport=async_transport).usage()
    assert usage.screenshots_taken == 42
    assert usage.period_end == "2025-02-01T00:00:00Z"
    assert "Content-Type" not in async_transport.calls[0].headers


def test_empty_api_key_is_rejected(async_transport):
    with pytest.raises(ValidationError):
        AsyncClient("", transport=async_transport)


def test_version_matches_blocking_client(async_transport):
    client = AsyncClient("key", transport=async_transport)
    assert client.version() == AsyncClient.version() == Client.version() == "1.0.0"
