from ..mpc.types import MPZ
from ..residuosity.ResiduosityTweaker import TweakResult


class CompressedSignature:
    """A signed element with its full and compressed signatures."""

    def __init__(self, sampled: MPZ, tweak: TweakResult, selector: int, s: MPZ, z: MPZ) -> None:
        """Initialize the signature record.

        Args:
            sampled (MPZ): The element as drawn, before tweaking
            tweak (TweakResult): The tweaked element and the adjustments applied
            selector (int): Which of the four roots s is
            s (MPZ): The full Rabin signature, s^2 = e (mod N)
            z (MPZ): The compressed signature
        """
        self._sampled = sampled
        self._tweak = tweak
        self._selector = selector
        self._s = s
        self._z = z

    def get_sampled(self) -> MPZ:
        return self._sampled

    def get_tweak(self) -> TweakResult:
        return self._tweak

    def get_e(self) -> MPZ:
        return self._tweak.element

    def get_selector(self) -> int:
        return self._selector

    def get_s(self) -> MPZ:
        return self._s

    def get_z(self) -> MPZ:
        return self._z
