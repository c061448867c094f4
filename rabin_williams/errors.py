"""Error types raised by the signature pipeline.

Every error derived from RabinWilliamsError is fatal: it propagates to the
entry point, which terminates the process with a nonzero status.
"""


class RabinWilliamsError(Exception):
    """Base class for fatal signature pipeline errors."""


class ResourceExhaustion(RabinWilliamsError):
    """The byte source could not supply the requested number of bytes,
    or the request exceeds the read buffer."""


class ArithmeticInvariantViolation(RabinWilliamsError):
    """A modular arithmetic sanity check failed."""


class TransientIO(RabinWilliamsError):
    """A read kept being interrupted after every retry."""
