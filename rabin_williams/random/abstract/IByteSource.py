from abc import ABC, abstractmethod


class IByteSource(ABC):
    """Abstract base class defining the interface for a source of random bytes."""

    @abstractmethod
    def read(self, count: int) -> bytes:
        """Read exactly count random bytes.

        Args:
            count (int): Number of bytes requested

        Returns:
            bytes: count bytes

        Raises:
            ResourceExhaustion: If the source cannot supply count bytes
        """
