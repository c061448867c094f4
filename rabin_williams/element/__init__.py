"""Random group element sampling."""

from .ElementSampler import ElementSampler

__all__ = ["ElementSampler"]
