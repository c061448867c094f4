import time
from multiprocessing import Pool
from typing import List, Tuple

from ..errors import ArithmeticInvariantViolation
from ..mpc import MPC
from ..mpc.types import MPZ
from ..utils.SystemSpecs import SystemSpecs


class VerificationEngine:
    """Verifies a compressed signature and benchmarks repeated verification."""

    def __init__(self, z: MPZ, N: MPZ, e: MPZ) -> None:
        """Initialize the engine with a fixed witness.

        Args:
            z (MPZ): The compressed signature
            N (MPZ): The modulus
            e (MPZ): The tweaked element that was signed
        """
        self._z = MPC.mpz(z)
        self._N = MPC.mpz(N)
        self._e = MPC.mpz(e)

    def verify(self) -> MPZ:
        """Check that z^2 * e mod N is a nonzero perfect square.

        Returns:
            MPZ: The integer square root of z^2 * e mod N

        Raises:
            ArithmeticInvariantViolation: If the witness is zero or not a square
        """
        return VerificationEngine._verify(self._z, self._N, self._e)

    def is_valid(self) -> bool:
        try:
            self.verify()
        except ArithmeticInvariantViolation:
            return False
        return True

    def benchmark(self, rounds: int) -> float:
        """Run rounds back-to-back verifications of the same witness.

        Args:
            rounds (int): Number of verifications

        Returns:
            float: Elapsed wall-clock time in seconds
        """
        if rounds < 1:
            raise ValueError(f"rounds must be positive, got {rounds}")

        start_time = time.perf_counter()
        VerificationEngine._verify_rounds((self._z, self._N, self._e, rounds))
        return time.perf_counter() - start_time

    def parallel_benchmark(self, rounds: int) -> float:
        """Same as benchmark, with the rounds split over a process pool.

        Args:
            rounds (int): Total number of verifications across all workers

        Returns:
            float: Elapsed wall-clock time in seconds, pool start-up included
        """
        if rounds < 1:
            raise ValueError(f"rounds must be positive, got {rounds}")

        num_workers = min(SystemSpecs.get_num_parallel_processes(), rounds)
        tasks = [
            (self._z, self._N, self._e, share)
            for share in VerificationEngine._split_rounds(rounds, num_workers)
        ]

        start_time = time.perf_counter()
        with Pool(num_workers) as pool:
            pool.map(VerificationEngine._verify_rounds, tasks)
        return time.perf_counter() - start_time

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _verify(z: MPZ, N: MPZ, e: MPZ) -> MPZ:
        w = MPC.mod(z * z * e, N)
        if w == 0:
            raise ArithmeticInvariantViolation("zero witness: z^2 * e = 0 (mod N)")

        root, remainder = MPC.isqrt_rem(w)
        if remainder != 0:
            raise ArithmeticInvariantViolation(
                f"z^2 * e mod N is not a perfect square (remainder {hex(remainder)})"
            )
        return root

    @staticmethod
    def _verify_rounds(args: Tuple[MPZ, MPZ, MPZ, int]) -> int:
        """Helper running one worker's share of verifications for multiprocessing."""
        z, N, e, rounds = args
        for _ in range(rounds):
            VerificationEngine._verify(z, N, e)
        return rounds

    @staticmethod
    def _split_rounds(rounds: int, num_workers: int) -> List[int]:
        share, extra = divmod(rounds, num_workers)
        return [share + (1 if i < extra else 0) for i in range(num_workers)]
