import pytest

from pxshot import ClientConfig

from .stubs import AsyncStubTransport, StubTransport


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key="test-key", base_url="https://api.test")


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def async_transport() -> AsyncStubTransport:
    return AsyncStubTransport()
