class CanvasDupError(Exception):
    """Base class for every error that terminates a canvas-dup run."""


class UsageError(CanvasDupError):
    pass


class DecodeError(CanvasDupError):
    pass


class OutOfBoundsError(CanvasDupError):
    pass


class EncodeError(CanvasDupError):
    pass
