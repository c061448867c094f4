import pytest
from gmpy2 import isqrt, isqrt_rem

from rabin_williams.element import ElementSampler
from rabin_williams.errors import ArithmeticInvariantViolation
from rabin_williams.residuosity import ResiduosityTweaker
from rabin_williams.signature import (
    ConvergentRing,
    SignatureCompressor,
    SquareRootSolver,
    VerificationEngine,
)


def test_convergent_ring():
    """Denominators of 67/77 = [0; 1, 6, 1, ...] are 1, 7, 8."""
    ring = ConvergentRing(0, 1)
    assert ring.advance() == 2
    assert ring.push(1) == 1
    assert ring.advance() == 3
    assert ring.push(6) == 7
    assert ring.advance() == 0  # wraps around
    assert ring.push(1) == 8
    assert ring.current() == 8
    assert ring.previous() == 7


def test_compress_small():
    """isqrt(77) = 8; the expansion of 67/77 reaches 8 at the third step, 7 is kept."""
    assert SignatureCompressor.compress(67, 77) == 7


def test_compress_short_signature():
    """s = 3 < isqrt(77): the first quotient already exceeds the bound, so z = 1."""
    assert SignatureCompressor.compress(3, 77) == 1


def test_compress_zero_signature():
    with pytest.raises(ArithmeticInvariantViolation):
        SignatureCompressor.compress(0, 77)


def test_compress_degenerate_expansion():
    """22/77 = 2/7 terminates with denominator 7 < isqrt(77)."""
    with pytest.raises(ArithmeticInvariantViolation):
        SignatureCompressor.compress(22, 77)


def test_compress_random_modulus(urandom_source, random_modulus):
    sampler = ElementSampler(urandom_source)
    N = random_modulus.get_N()

    for _ in range(25):
        e = ResiduosityTweaker.tweak(sampler.sample(N.bit_length(), N), random_modulus).element
        s = SquareRootSolver.solve_random(e, random_modulus, urandom_source)
        z = SignatureCompressor.compress(s, N)

        assert 0 < z < isqrt(N)
        assert z.bit_length() <= (N.bit_length() + 1) // 2
        w = (z * z * e) % N
        assert w != 0
        assert isqrt_rem(w)[1] == 0


def test_compress_toy_modulus_boundary():
    """N = 3 * 31 = 93, isqrt(N) = 9 and 93 // 10 = 9 hits the bound at once.

    z = 1 leaves the witness 10^2 mod 93 = 7, which is not a square.
    """
    z = SignatureCompressor.compress(10, 93)
    assert z == 1
    assert not VerificationEngine(z, 93, 7).is_valid()
