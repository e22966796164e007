"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class CombatError(Exception):
    """Base exception for fight resolution problems caused by bad input."""


class InvalidCombatantError(CombatError):
    """Raised when a fight is started with a defeated or malformed participant."""


class CombatStalemateError(CombatError):
    """Raised when a fight exceeds the round cap without a result."""
