from ..errors import ArithmeticInvariantViolation
from ..mpc import MPC
from ..mpc.types import MPZ
from .ConvergentRing import ConvergentRing


class SignatureCompressor:
    """Bleichenbacher compression of Rabin signatures.

    See "Compressing Rabin Signatures", Daniel Bleichenbacher. Expanding s/N
    as a continued fraction yields denominators z_k with z_k * s = t_k
    (mod N) and |t_k| < N / z_(k+1). Taking the last denominator below
    isqrt(N) therefore gives t^2 < N, so z^2 * e mod N is exactly t^2 and the
    verifier only needs z, half the size of s. When the next denominator
    lands exactly on isqrt(N), t^2 may reach N; this only shows up for toy
    moduli (e.g. N = 93, s = 10).
    """

    @staticmethod
    def compress(s: MPZ, N: MPZ) -> MPZ:
        """Compress the signature s modulo N.

        Args:
            s (MPZ): Square root of e modulo N
            N (MPZ): The modulus

        Returns:
            MPZ: z < isqrt(N) such that z^2 * e mod N is a perfect square
        """
        root = MPC.isqrt(N)
        s = MPC.mpz(s)
        n = MPC.mpz(N)

        ring = ConvergentRing(MPC.mpz(0), MPC.mpz(1))

        while True:
            position = ring.advance()

            # Alternate the Euclidean step between the two remainders
            if position & 1:
                if n == 0:
                    raise ArithmeticInvariantViolation(
                        "continued fraction of s/N terminated before reaching isqrt(N)"
                    )
                cf, s = MPC.divmod(s, n)
            else:
                if s == 0:
                    raise ArithmeticInvariantViolation(
                        "continued fraction of s/N terminated before reaching isqrt(N)"
                    )
                cf, n = MPC.divmod(n, s)

            if ring.push(cf) >= root:
                return ring.previous()
