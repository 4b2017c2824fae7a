import pytest

from braintrip.services.cache import CacheRegistry
from tests.fakes import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def caches(clock: FakeClock) -> CacheRegistry:
    return CacheRegistry(clock=clock)
