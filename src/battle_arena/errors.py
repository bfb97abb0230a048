class BattleError(Exception):
    """Base for battle engine errors."""


class InvalidCombatantError(BattleError):
    """A creature or move record could not be turned into a valid combatant."""

    def __init__(self, name: str, detail: str):
        super().__init__(f"Invalid combatant '{name}': {detail}")
        self.name = name
        self.detail = detail


class InvalidTransitionError(BattleError):
    """The engine tried to move the state machine along an edge it does not have."""

    def __init__(self, current: str, target: str):
        super().__init__(f"Illegal battle status transition: {current} -> {target}")
        self.current = current
        self.target = target
