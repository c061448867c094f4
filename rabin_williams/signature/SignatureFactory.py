from ..element.ElementSampler import ElementSampler
from ..modulus.abstract.IBlumModulus import IBlumModulus
from ..random.abstract.IByteSource import IByteSource
from ..residuosity.ResiduosityTweaker import ResiduosityTweaker
from .CompressedSignature import CompressedSignature
from .SignatureCompressor import SignatureCompressor
from .SquareRootSolver import SquareRootSolver


class SignatureFactory:
    """Factory producing compressed signatures of random elements."""

    def __init__(self, modulus: IBlumModulus, source: IByteSource) -> None:
        """Initialize the factory.

        Args:
            modulus (IBlumModulus): Modulus with its private factors
            source (IByteSource): Random source for elements and root selection
        """
        self._modulus = modulus
        self._source = source
        self._sampler = ElementSampler(source)

    def create_signature(self, element_bit_size: int) -> CompressedSignature:
        N = self._modulus.get_N()

        # Draw an element and move it into the squares modulo N
        sampled = self._sampler.sample(element_bit_size, N)
        tweak = ResiduosityTweaker.tweak(sampled, self._modulus)

        selector = SquareRootSolver.random_selector(self._source)
        s = SquareRootSolver.solve(tweak.element, self._modulus, selector)

        z = SignatureCompressor.compress(s, N)

        return CompressedSignature(sampled, tweak, selector, s, z)
