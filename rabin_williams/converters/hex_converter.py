"""Hex rendering of group values for diagnostic output."""

from ..mpc import MPC
from ..mpc.types import MPZ


def to_hex(value: MPZ) -> str:
    """Render value as lowercase hex without a 0x prefix.

    Args:
        value (MPZ): Any integer, negative values keep their sign

    Returns:
        str: e.g. "4d" for 77, "-15" for -21
    """
    return MPC.mpz(value).digits(16)
