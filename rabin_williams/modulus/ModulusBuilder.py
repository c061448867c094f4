from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import P_MOD8, Q_MOD8
from .BlumModulus import BlumModulus


class ModulusBuilder:
    """Builds a Blum modulus and its CRT recombination weights from two primes."""

    @staticmethod
    def build(p: MPZ, q: MPZ) -> BlumModulus:
        """Multiply the primes and run extended Euclid once.

        Args:
            p (MPZ): Prime with p = 3 (mod 8)
            q (MPZ): Prime with q = 7 (mod 8)

        Returns:
            BlumModulus: N = p * q with U = u*p, V = v*q where u*p + v*q = 1
        """
        p = MPC.mpz(p)
        q = MPC.mpz(q)
        if p == q:
            raise ValueError("p and q must be distinct primes")
        # The residuosity tweak relies on 2 being a non-residue mod p only
        if p % 8 != P_MOD8 or q % 8 != Q_MOD8:
            raise ValueError(f"p and q must be {P_MOD8} and {Q_MOD8} (mod 8)")

        N = p * q

        g, u, v = MPC.gcdext(p, q)
        if g != 1:
            raise ValueError(f"p and q are not coprime (gcd {g})")

        # Scale the Bezout coefficients into CRT weights
        U = MPC.mod(u * p, N)
        V = MPC.mod(v * q, N)

        return BlumModulus(
            p=p,
            q=q,
            N=N,
            U=U,
            V=V,
            p_power=(p + 1) // 4,
            q_power=(q + 1) // 4,
        )
