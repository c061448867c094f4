from ..mpc.types import MPZ
from .abstract.IBlumModulus import IBlumModulus


class BlumModulus(IBlumModulus):
    """A Blum modulus N = p * q together with its CRT data."""

    def __init__(
        self, p: MPZ, q: MPZ, N: MPZ, U: MPZ, V: MPZ, p_power: MPZ, q_power: MPZ
    ) -> None:
        self._p = p
        self._q = q
        self._N = N
        self._U = U
        self._V = V
        self._p_power = p_power
        self._q_power = q_power

    def get_p(self) -> MPZ:
        return self._p

    def get_q(self) -> MPZ:
        return self._q

    def get_N(self) -> MPZ:
        return self._N

    def get_U(self) -> MPZ:
        return self._U

    def get_V(self) -> MPZ:
        return self._V

    def get_p_power(self) -> MPZ:
        return self._p_power

    def get_q_power(self) -> MPZ:
        return self._q_power

    def __repr__(self):
        return f"<BlumModulus(N={hex(self._N)})>"
