"""Quadratic residuosity classification and adjustment."""

from .ResiduosityClassifier import ResiduosityClassifier
from .ResiduosityTweaker import ResiduosityTweaker, TweakResult

__all__ = ["ResiduosityClassifier", "ResiduosityTweaker", "TweakResult"]
