"""Exceptions raised during enzyme constraint model construction."""


class PreconditionError(ValueError):
    """Network not suitable for conversion (incompatible import, reserved ids in use).

    Raised before the network gets modified.
    """
    pass


class InternalConsistencyError(RuntimeError):
    """Enzyme constraint data structures became inconsistent."""
    pass


class GprSyntaxError(ValueError):
    """Gene product association could not be parsed."""
    pass
