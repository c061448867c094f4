from abc import ABC, abstractmethod
from typing import Tuple
from ...mpc.types import MPZ


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number generation."""

    @abstractmethod
    def generate(self, bit_size: int, mod8: int) -> MPZ:
        """Get a random prime with a fixed residue modulo 8.

        Args:
            bit_size (int): Number of bits for the prime number.
            mod8 (int): Required value of the prime modulo 8.

        Returns:
            MPZ: A random prime p with p % 8 == mod8
        """

    @abstractmethod
    def generate_pair(self, bit_size: int) -> Tuple[MPZ, MPZ]:
        """Get the two distinct prime factors of a Blum modulus.

        Args:
            bit_size (int): Number of bits for each prime.

        Returns:
            Tuple[MPZ, MPZ]: (p, q) with p = 3 and q = 7 (mod 8)
        """
