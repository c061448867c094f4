from abc import ABC, abstractmethod
from typing import Tuple
from ..types import MPZ


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def from_bytes(data: bytes) -> MPZ:
        """Interpret bytes as a big-endian unsigned integer.

        Args:
            data (bytes): Most significant byte first

        Returns:
            mpz: The decoded integer
        """

    @staticmethod
    @abstractmethod
    def bit_set(value: MPZ, index: int) -> MPZ:
        """Return value with bit index set."""

    @staticmethod
    @abstractmethod
    def bit_clear(value: MPZ, index: int) -> MPZ:
        """Return value with bit index cleared."""

    @staticmethod
    @abstractmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        """Probabilistic primality test.

        Args:
            value (mpz): Candidate
            rounds (int): Number of Miller-Rabin rounds

        Returns:
            bool: False if value is definitely composite
        """

    @staticmethod
    @abstractmethod
    def gcdext(a: MPZ, b: MPZ) -> Tuple[MPZ, MPZ, MPZ]:
        """Extended Euclid.

        Returns:
            Tuple[mpz, mpz, mpz]: (g, s, t) such that a*s + b*t = g = gcd(a, b)
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction, in [0, modulus)
        """

    @staticmethod
    @abstractmethod
    def divmod(value: MPZ, divisor: MPZ) -> Tuple[MPZ, MPZ]:
        """Floor division with remainder.

        Returns:
            Tuple[mpz, mpz]: (quotient, remainder)
        """

    @staticmethod
    @abstractmethod
    def isqrt(value: MPZ) -> MPZ:
        """Integer square root, rounded down."""

    @staticmethod
    @abstractmethod
    def isqrt_rem(value: MPZ) -> Tuple[MPZ, MPZ]:
        """Integer square root with remainder.

        Returns:
            Tuple[mpz, mpz]: (root, value - root * root)
        """
