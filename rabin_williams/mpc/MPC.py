from typing import Tuple

import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def from_bytes(data: bytes) -> MPZ:
        return gmpy2.mpz(int.from_bytes(data, "big"))

    @staticmethod
    def bit_set(value: MPZ, index: int) -> MPZ:
        return gmpy2.bit_set(value, index)

    @staticmethod
    def bit_clear(value: MPZ, index: int) -> MPZ:
        return gmpy2.bit_clear(value, index)

    @staticmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        return gmpy2.is_prime(value, rounds)

    @staticmethod
    def gcdext(a: MPZ, b: MPZ) -> Tuple[MPZ, MPZ, MPZ]:
        return gmpy2.gcdext(a, b)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return gmpy2.f_mod(value, modulus)  # floor semantics, result is never negative

    @staticmethod
    def divmod(value: MPZ, divisor: MPZ) -> Tuple[MPZ, MPZ]:
        return gmpy2.f_divmod(value, divisor)

    @staticmethod
    def isqrt(value: MPZ) -> MPZ:
        return gmpy2.isqrt(value)

    @staticmethod
    def isqrt_rem(value: MPZ) -> Tuple[MPZ, MPZ]:
        return gmpy2.isqrt_rem(value)
