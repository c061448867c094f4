"""Signing, compression and verification."""

from .SquareRootSolver import SquareRootSolver
from .ConvergentRing import ConvergentRing
from .SignatureCompressor import SignatureCompressor
from .VerificationEngine import VerificationEngine
from .CompressedSignature import CompressedSignature
from .SignatureFactory import SignatureFactory

__all__ = [
    "SquareRootSolver",
    "ConvergentRing",
    "SignatureCompressor",
    "VerificationEngine",
    "CompressedSignature",
    "SignatureFactory",
]
