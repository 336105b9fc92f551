"""Battle-layer exceptions."""


class BattleError(Exception):
    """Base class for battle errors."""


class BattleConfigurationError(BattleError):
    """Raised at setup time when a battle is missing or has invalid configuration."""
