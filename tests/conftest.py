from unittest.mock import AsyncMock

import pytest

from truemarkets_agg.providers.core import ContractReaderABC
from truemarkets_agg.providers.truemarkets import TrueMarketsProvider
from truemarkets_agg.services import TrueMarketsService


@pytest.fixture
def reader():
    # read_one / read_batch / close are coroutines on the ABC, so they come back as AsyncMocks
    return AsyncMock(spec=ContractReaderABC)


@pytest.fixture
def provider(reader):
    return TrueMarketsProvider(reader)


@pytest.fixture
def service(provider):
    return TrueMarketsService(provider)
