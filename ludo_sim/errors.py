class LudoSimError(Exception):
    """Base exception for simulator errors."""

    pass


class ConfigurationError(LudoSimError, ValueError):
    """Raised when player, token or round counts (or strategy assignments) are invalid."""

    pass


class StalledRoundError(LudoSimError):
    """Raised when a round exceeds the configured turn limit."""

    pass
