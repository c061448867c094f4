from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IBlumModulus(ABC):
    """Abstract base class defining the interface for a Blum modulus with its private factors."""

    @abstractmethod
    def get_p(self) -> MPZ:
        """Get the first prime factor p.

        Returns:
            MPZ: The prime number p, p = 3 (mod 8)
        """

    @abstractmethod
    def get_q(self) -> MPZ:
        """Get the second prime factor q.

        Returns:
            MPZ: The prime number q, q = 7 (mod 8)
        """

    @abstractmethod
    def get_N(self) -> MPZ:
        """Get the modulus N = p * q.

        Returns:
            MPZ: The modulus N
        """

    @abstractmethod
    def get_U(self) -> MPZ:
        """Get the CRT weight selecting the q component.

        Returns:
            MPZ: U with U = 0 (mod p) and U = 1 (mod q)
        """

    @abstractmethod
    def get_V(self) -> MPZ:
        """Get the CRT weight selecting the p component.

        Returns:
            MPZ: V with V = 1 (mod p) and V = 0 (mod q)
        """

    @abstractmethod
    def get_p_power(self) -> MPZ:
        """Get the square root exponent (p + 1) / 4."""

    @abstractmethod
    def get_q_power(self) -> MPZ:
        """Get the square root exponent (q + 1) / 4."""
