"""Converters for diagnostic output."""

from .hex_converter import to_hex

__all__ = ["to_hex"]
