from ..mpc import MPC
from ..mpc.types import MPZ


class ResiduosityClassifier:
    """Quadratic residue test modulo a prime p = 3 (mod 4)."""

    @staticmethod
    def is_residue(e: MPZ, p: MPZ, power: MPZ) -> bool:
        """Check whether e is a square modulo p.

        For p = 3 (mod 4), r = e^((p+1)/4) is a square root of e whenever one
        exists, so e is a residue iff r^2 = e (mod p). Zero counts as a residue.

        Args:
            e (MPZ): Element to classify
            p (MPZ): Prime factor
            power (MPZ): (p + 1) / 4, the exponent later used to take the root

        Returns:
            bool: True if e is a quadratic residue modulo p
        """
        e_mod = MPC.mod(e, p)
        r = MPC.powmod(e, power, p)
        return MPC.mod(r * r, p) == e_mod
