from typing import Tuple

from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import P_MOD8, Q_MOD8, PRIMALITY_ROUNDS
from ..random.abstract.IByteSource import IByteSource
from .abstract.IPrimes import IPrimes


class PrimeFactory(IPrimes):
    """Random primes in a fixed residue class modulo 8."""

    def __init__(self, source: IByteSource) -> None:
        self._source = source

    def generate(self, bit_size: int, mod8: int) -> MPZ:
        num_bytes = bit_size >> 3
        if num_bytes == 0:
            raise ValueError(f"bit_size must be at least 8, got {bit_size}")
        if mod8 not in (1, 3, 5, 7):
            raise ValueError(f"mod8 must be an odd residue in [1, 7], got {mod8}")

        while True:
            candidate = MPC.from_bytes(self._source.read(num_bytes))

            # Force candidate % 8 == mod8: bit 0 always, bits 1 and 2 from mod8
            candidate = MPC.bit_set(candidate, 0)
            for bit in (1, 2):
                if mod8 & (1 << bit):
                    candidate = MPC.bit_set(candidate, bit)
                else:
                    candidate = MPC.bit_clear(candidate, bit)

            if MPC.is_prime(candidate, PRIMALITY_ROUNDS):
                return candidate

    def generate_pair(self, bit_size: int) -> Tuple[MPZ, MPZ]:
        # Distinct residue classes mod 8, so p != q always holds
        return self.generate(bit_size, P_MOD8), self.generate(bit_size, Q_MOD8)
