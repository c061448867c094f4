"""Blum modulus construction."""

from .BlumModulus import BlumModulus
from .ModulusBuilder import ModulusBuilder
from .abstract.IBlumModulus import IBlumModulus

__all__ = ["BlumModulus", "ModulusBuilder", "IBlumModulus"]
