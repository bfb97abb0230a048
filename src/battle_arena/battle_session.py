import logging
from typing import Any, Optional

from pydantic import ValidationError

from src.battle_arena.battle_engine import BattleEngine
from src.battle_arena.enums import BattleSide, BattleStatus
from src.battle_arena.errors import InvalidCombatantError
from src.battle_arena.schema.battle_result import BattleEvent, BattleSnapshot
from src.battle_arena.schema.combatant import Combatant
from src.battle_arena.utils.rng import RandomSource

logger = logging.getLogger(__name__)


def validate_combatant(record: Combatant | dict[str, Any]) -> Combatant:
    """Accept a ready Combatant or a raw record; anything malformed is a construction failure"""
    if isinstance(record, Combatant):
        return record
    name = str(record.get("name", "<unnamed>")) if isinstance(record, dict) else "<unnamed>"
    try:
        return Combatant.model_validate(record)
    except ValidationError as e:
        logger.warning("Rejected combatant record %s: %d validation error(s)", name, e.error_count())
        raise InvalidCombatantError(name, str(e)) from e


class BattleSession:
    """
    One match between the player and the computer

    The session owns the only BattleEngine (and therefore the only mutable
    battle state) of the match. Consumers read snapshots and issue the single
    player command, ``select_move``; ``begin_turn``/``advance`` are available
    for consumers that want to pace the turn step by step.
    """

    def __init__(
        self,
        player: Combatant | dict[str, Any],
        bot: Combatant | dict[str, Any],
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.player = validate_combatant(player)
        self.bot = validate_combatant(bot)
        self._engine = BattleEngine()
        self.start_events = self._engine.initialize_battle(self.player, self.bot, seed=seed, rng=rng)

    # Commands

    def select_move(self, move_id: int) -> list[BattleEvent]:
        return self._engine.select_move(move_id)

    def begin_turn(self, move_id: int) -> list[BattleEvent]:
        return self._engine.begin_turn(move_id)

    def advance(self) -> list[BattleEvent]:
        return self._engine.advance()

    # Read-only views

    def snapshot(self) -> BattleSnapshot:
        return self._engine.get_snapshot()

    @property
    def status(self) -> BattleStatus:
        return self._engine.battle_state.status

    @property
    def turn(self) -> int:
        return self._engine.battle_state.turn_count

    @property
    def first_attacker(self) -> BattleSide:
        return self._engine.battle_state.first_attacker

    @property
    def messages(self) -> list[str]:
        return list(self._engine.battle_state.messages)

    @property
    def is_battle_over(self) -> bool:
        return self._engine.is_battle_over()

    @property
    def winner(self) -> Optional[BattleSide]:
        return self._engine.get_winner()

    @property
    def needs_struggle(self) -> bool:
        return self._engine.needs_struggle()

    @property
    def accepting_input(self) -> bool:
        return self._engine.is_accepting_input()
