"""Engine exceptions."""


class InvalidArgumentError(ValueError):
    """Raised when a game is configured with values outside its invariants."""
