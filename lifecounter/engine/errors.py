"""Engine exceptions."""


class LifeCounterError(Exception):
    """Base class for engine errors."""


class InvalidArgumentError(LifeCounterError, ValueError):
    """Raised for an argument outside its legal range (e.g. player count)."""


class PlayerIndexError(LifeCounterError, IndexError):
    """Raised when a life change addresses a player that does not exist."""
