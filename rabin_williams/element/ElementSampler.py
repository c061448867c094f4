from ..mpc import MPC
from ..mpc.types import MPZ
from ..random.abstract.IByteSource import IByteSource


class ElementSampler:
    """Draws random group elements modulo N."""

    def __init__(self, source: IByteSource) -> None:
        self._source = source

    def sample(self, bit_size: int, N: MPZ) -> MPZ:
        """Read bit_size // 8 random bytes and reduce them modulo N.

        There is no rejection sampling, so the result carries a small modulo
        bias whenever 2**bit_size is not a multiple of N.

        Args:
            bit_size (int): Bits of randomness to draw, normally the bit size of N
            N (MPZ): The modulus

        Returns:
            MPZ: An element e with 0 <= e < N
        """
        num_bytes = bit_size >> 3
        if num_bytes == 0:
            raise ValueError(f"bit_size must be at least 8, got {bit_size}")

        return MPC.mod(MPC.from_bytes(self._source.read(num_bytes)), N)
