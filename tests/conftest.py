import io

import pytest

from rabin_williams.modulus import ModulusBuilder
from rabin_williams.primes import PrimeFactory
from rabin_williams.random import FileByteSource


@pytest.fixture
def byte_source():
    """Factory fixture for deterministic byte sources over fixed bytes."""
    def _create_source(data: bytes) -> FileByteSource:
        return FileByteSource(io.BytesIO(data))
    return _create_source


@pytest.fixture
def urandom_source():
    """Fixture opening the system random source."""
    with FileByteSource.open("/dev/urandom") as source:
        yield source


@pytest.fixture
def small_modulus():
    """Fixture for the toy modulus N = 11 * 7 = 77."""
    return ModulusBuilder.build(11, 7)


@pytest.fixture
def random_modulus(urandom_source):
    """Fixture for a random Blum modulus with 128-bit factors."""
    p, q = PrimeFactory(urandom_source).generate_pair(128)
    return ModulusBuilder.build(p, q)
