"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class CombatantConstructionError(FactoryError):
    """Raised when stat or skill data cannot produce a valid combatant."""


class BattleSessionError(Exception):
    """Raised when a battle session is driven outside its lifecycle."""
