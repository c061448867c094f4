import pytest

from rabin_williams.element import ElementSampler
from rabin_williams.errors import ResourceExhaustion


def test_sample_fixed_bytes(byte_source):
    """0x014f = 335 = 4 * 77 + 27."""
    assert ElementSampler(byte_source(b"\x01\x4f")).sample(16, 77) == 27


def test_sample_reduces_without_rejection(byte_source):
    """0xffff = 65535 = 851 * 77 + 8 is reduced, not redrawn."""
    source = byte_source(b"\xff\xff\x00\x01")
    assert ElementSampler(source).sample(16, 77) == 8
    assert source.read(2) == b"\x00\x01"


def test_sample_range(urandom_source, random_modulus):
    sampler = ElementSampler(urandom_source)
    N = random_modulus.get_N()
    for _ in range(50):
        e = sampler.sample(N.bit_length(), N)
        assert 0 <= e < N


def test_sample_short_read(byte_source):
    with pytest.raises(ResourceExhaustion):
        ElementSampler(byte_source(b"\x01")).sample(16, 77)


def test_sample_oversized_request(byte_source):
    with pytest.raises(ResourceExhaustion):
        ElementSampler(byte_source(b"")).sample(4096 * 8, 77)


def test_sample_invalid_bit_size(byte_source):
    with pytest.raises(ValueError):
        ElementSampler(byte_source(b"\x01")).sample(4, 77)
