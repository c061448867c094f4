from typing import NamedTuple, Tuple

from ..mpc import MPC
from ..mpc.types import MPZ
from ..modulus.abstract.IBlumModulus import IBlumModulus
from .ResiduosityClassifier import ResiduosityClassifier


class TweakResult(NamedTuple):
    element: MPZ
    doubled: bool
    negated: bool
    residue_state: Tuple[bool, bool]  # (residue mod p, residue mod q) before tweaking


class ResiduosityTweaker:
    """Moves an element into the subgroup of squares modulo both factors.

    With p = 3 and q = 7 (mod 8), 2 is a non-residue mod p and a residue mod
    q, so doubling flips residuosity mod p only. -1 is a non-residue modulo
    both, so negation flips both flags. One of the four combinations always
    lands on (residue, residue).
    """

    @staticmethod
    def tweak(e: MPZ, modulus: IBlumModulus) -> TweakResult:
        p, q, N = modulus.get_p(), modulus.get_q(), modulus.get_N()

        a = ResiduosityClassifier.is_residue(e, p, modulus.get_p_power())
        b = ResiduosityClassifier.is_residue(e, q, modulus.get_q_power())
        residue_state = (a, b)

        doubled = negated = False

        if a != b:
            doubled = True
            a = not a

        if not a:
            negated = True
            a = not a
            b = not b

        if negated:
            e = -e
        if doubled:
            e = e * 2
        if negated or doubled:
            e = MPC.mod(e, N)

        return TweakResult(e, doubled, negated, residue_state)
