from ..mpc import MPC
from ..mpc.types import MPZ
from ..modulus.abstract.IBlumModulus import IBlumModulus
from ..random.abstract.IByteSource import IByteSource

ROOT_SELECTOR_MASK = 3


class SquareRootSolver:
    """Square roots modulo a Blum integer using its factorization."""

    @staticmethod
    def solve(e: MPZ, modulus: IBlumModulus, selector: int) -> MPZ:
        """Compute one of the four square roots of e modulo N.

        Args:
            e (MPZ): A quadratic residue modulo both p and q
            modulus (IBlumModulus): The modulus with its private factors
            selector (int): Root selector in [0, 3]; bit 0 negates the root
                mod p, bit 1 negates the root mod q

        Returns:
            MPZ: s with s^2 = e (mod N)
        """
        if not 0 <= selector <= ROOT_SELECTOR_MASK:
            raise ValueError(f"selector must be in [0, 3], got {selector}")

        p_root = MPC.powmod(e, modulus.get_p_power(), modulus.get_p())
        q_root = MPC.powmod(e, modulus.get_q_power(), modulus.get_q())

        if selector & 1:
            p_root = -p_root
        if selector & 2:
            q_root = -q_root

        # CRT: V carries the p component, U the q component
        return MPC.mod(p_root * modulus.get_V() + q_root * modulus.get_U(), modulus.get_N())

    @staticmethod
    def random_selector(source: IByteSource) -> int:
        return source.read(1)[0] & ROOT_SELECTOR_MASK

    @staticmethod
    def solve_random(e: MPZ, modulus: IBlumModulus, source: IByteSource) -> MPZ:
        """Compute a square root of e, choosing the root with one random byte."""
        return SquareRootSolver.solve(e, modulus, SquareRootSolver.random_selector(source))
