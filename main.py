"""
Main script to run the compressed Rabin/Williams signature benchmark.

Generates a Blum modulus N = p * q, signs a random element with a Rabin
signature, compresses the signature to half the size of N and times a large
number of verifications of the compressed signature.

All diagnostics go to stderr. Any invariant violation aborts with status 1.
"""

import sys

from rabin_williams.converters import to_hex
from rabin_williams.errors import RabinWilliamsError
from rabin_williams.modulus import BlumModulus, ModulusBuilder
from rabin_williams.mpc.types import MPZ
from rabin_williams.primes import PrimeFactory
from rabin_williams.protocol_constants import ELEMENT_BIT_SIZE, PRIME_BIT_SIZE
from rabin_williams.random import FileByteSource, Random
from rabin_williams.signature import CompressedSignature, SignatureFactory, VerificationEngine
from rabin_williams.utils import EnvironmentManager, EnvironmentVariables


def log(message: str) -> None:
    print(message, file=sys.stderr)


def log_value(banner: str, value: MPZ) -> None:
    log(f"{banner}{to_hex(value)}")


class SignatureService:
    """Service class running the signing pipeline with diagnostics."""

    def __init__(self, source: FileByteSource):
        """
        Initialize the service.

        Args:
            source: Random byte source shared by every step
        """
        self.source = source
        self.prime_factory = PrimeFactory(source)

    def generate_group(self, bit_size: int) -> BlumModulus:
        log("Generating group...")
        p, q = self.prime_factory.generate_pair(bit_size)
        log_value("  p:", p)
        log_value("  q:", q)

        log("Performing extended Euclid...")
        modulus = ModulusBuilder.build(p, q)
        log_value("  n:", modulus.get_N())
        log_value("  u:", modulus.get_U())
        log_value("  v:", modulus.get_V())
        return modulus

    def sign(self, modulus: BlumModulus, bit_size: int) -> CompressedSignature:
        log("Picking random element, tweaking and signing...")
        signature = SignatureFactory(modulus, self.source).create_signature(bit_size)

        tweak = signature.get_tweak()
        a, b = tweak.residue_state
        log_value("  e:", signature.get_sampled())
        log(f"  residue state: [{int(a)}, {int(b)}]")
        log(f"  tweaks: 2:{int(tweak.doubled)} -:{int(tweak.negated)}")
        log_value("  tweaked e:", signature.get_e())
        log(f"  root: {signature.get_selector()}")
        log_value("  sig:", signature.get_s())
        log_value("  zsig:", signature.get_z())
        return signature

    def benchmark(self, modulus: BlumModulus, signature: CompressedSignature) -> float:
        rounds = EnvironmentManager.get_int(EnvironmentVariables.VERIFICATION_ROUNDS)
        parallel = EnvironmentManager.get_bool(EnvironmentVariables.PARALLEL_VERIFY)

        engine = VerificationEngine(signature.get_z(), modulus.get_N(), signature.get_e())

        log(f"Performing {rounds} verifications{' in parallel' if parallel else ''}")
        if parallel:
            elapsed = engine.parallel_benchmark(rounds)
        else:
            elapsed = engine.benchmark(rounds)
        log(f"verify time: {elapsed:f}")
        return elapsed


def main() -> int:
    """Run the signature demonstration and verification benchmark."""
    try:
        with Random.get_source() as source:
            service = SignatureService(source)
            modulus = service.generate_group(PRIME_BIT_SIZE)
            signature = service.sign(modulus, ELEMENT_BIT_SIZE)
        service.benchmark(modulus, signature)
    except (RabinWilliamsError, ValueError) as e:
        log(f"fatal: {type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
