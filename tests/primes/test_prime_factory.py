import pytest
from gmpy2 import mpz

from rabin_williams.errors import ResourceExhaustion
from rabin_williams.primes import PrimeFactory


def is_prime_by_trial_division(n: int) -> bool:
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


def test_generate_fixed_bytes(byte_source):
    """0x0b = 11 already satisfies 11 = 3 (mod 8) and is prime."""
    factory = PrimeFactory(byte_source(b"\x0b"))
    p = factory.generate(8, 3)
    assert p == mpz(11)
    assert isinstance(p, mpz)


def test_generate_retries_composites(byte_source):
    """0x18 = 24 becomes 27 = 3^3 after forcing the low bits, so a second byte is read."""
    source = byte_source(b"\x18\x0b\xff")
    p = PrimeFactory(source).generate(8, 3)
    assert p == 11
    # Exactly two bytes consumed
    assert source.read(1) == b"\xff"


def test_generate_forces_residue_bits(byte_source):
    """0x00 becomes 7 for target 7; 0x07 becomes 3 for target 3 (bit 2 cleared)."""
    assert PrimeFactory(byte_source(b"\x00")).generate(8, 7) == 7
    assert PrimeFactory(byte_source(b"\x07")).generate(8, 3) == 3


@pytest.mark.parametrize("mod8", [3, 7])
def test_generate_residue_property(urandom_source, mod8):
    factory = PrimeFactory(urandom_source)
    for _ in range(20):
        p = factory.generate(16, mod8)
        assert p % 8 == mod8
        assert p % 2 == 1
        assert p < 2**16
        assert is_prime_by_trial_division(int(p))


def test_generate_pair(urandom_source):
    p, q = PrimeFactory(urandom_source).generate_pair(64)
    assert p % 8 == 3
    assert q % 8 == 7
    assert p != q
    assert p.bit_length() <= 64 and q.bit_length() <= 64


def test_generate_oversized_request(byte_source):
    with pytest.raises(ResourceExhaustion):
        PrimeFactory(byte_source(b"")).generate(2049 * 8, 3)


def test_generate_short_read(byte_source):
    with pytest.raises(ResourceExhaustion):
        PrimeFactory(byte_source(b"\x18")).generate(8, 3)  # 27 is composite, then EOF


def test_generate_invalid_arguments(byte_source):
    factory = PrimeFactory(byte_source(b"\x00" * 4))
    with pytest.raises(ValueError):
        factory.generate(7, 3)
    with pytest.raises(ValueError):
        factory.generate(16, 4)
