"""Random byte source module."""

from .Random import Random
from .FileByteSource import FileByteSource
from .abstract.IByteSource import IByteSource

__all__ = ["Random", "FileByteSource", "IByteSource"]
