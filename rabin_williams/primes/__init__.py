"""Prime number generation module."""

from .PrimeFactory import PrimeFactory
from .abstract.IPrimes import IPrimes

__all__ = ["PrimeFactory", "IPrimes"]
