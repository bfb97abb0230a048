from pydantic import BaseModel, ConfigDict, Field

from src.battle_arena.constants import FIRST_TURN
from src.battle_arena.enums import BattleSide, BattleStatus
from src.battle_arena.schema.battle_move import BattleMove
from src.battle_arena.schema.battle_result import AttackOutcome
from src.battle_arena.schema.combatant import Combatant
from src.battle_arena.schema.pp_table import PPTable
from src.battle_arena.utils.rng import RandomSource


class BattleState(BaseModel):
    """
    Complete mutable state of one battle

    Owned by a single BattleEngine; nothing outside the engine writes to it.

    Key design principles:
    - No presentation state (no timers, sprites, animation frames)
    - HP and PP are only changed by the turn resolver
    - Every random draw comes from ``rng``
    """

    # Allow mutation for battle state updates
    model_config = ConfigDict(frozen=False)

    # =================================================================
    # COMBATANTS
    # =================================================================

    player: Combatant | None = None
    bot: Combatant | None = None

    # =================================================================
    # CORE BATTLE FLOW STATE
    # =================================================================

    turn_count: int = Field(ge=FIRST_TURN, default=FIRST_TURN)
    status: BattleStatus = BattleStatus.READY

    # Internal lock: True while a turn is being resolved
    resolving: bool = False

    # Speed order applies to turn 1 only; afterwards the player always leads
    first_attacker: BattleSide = BattleSide.PLAYER
    is_first_turn_resolved: bool = False

    # =================================================================
    # HIT POINTS
    # =================================================================

    player_hp: int = Field(ge=0, default=0)
    player_max_hp: int = Field(ge=0, default=0)
    bot_hp: int = Field(ge=0, default=0)
    bot_max_hp: int = Field(ge=0, default=0)

    # =================================================================
    # MOVES AND PP
    # =================================================================

    player_pp: PPTable = Field(default_factory=PPTable)
    bot_pp: PPTable = Field(default_factory=PPTable)

    # Moves chosen for the turn in flight, cleared when the turn completes
    player_selected_move: BattleMove | None = None
    bot_selected_move: BattleMove | None = None

    # Attack queue for the turn in flight, in execution order
    pending_attackers: list[BattleSide] = Field(default_factory=list)

    # Last move used by each side and the last attack outcome (transient)
    last_player_move: BattleMove | None = None
    last_bot_move: BattleMove | None = None
    last_attack: AttackOutcome | None = None

    # =================================================================
    # HEADLESS MESSAGE LOG
    # =================================================================

    messages: list[str] = Field(default_factory=list)

    # Random number source (for deterministic testing)
    rng: RandomSource = Field(default_factory=RandomSource)

    def get_combatant(self, side: BattleSide) -> Combatant | None:
        return self.player if side == BattleSide.PLAYER else self.bot

    def get_hp(self, side: BattleSide) -> int:
        return self.player_hp if side == BattleSide.PLAYER else self.bot_hp

    def get_max_hp(self, side: BattleSide) -> int:
        return self.player_max_hp if side == BattleSide.PLAYER else self.bot_max_hp

    def get_pp_table(self, side: BattleSide) -> PPTable:
        return self.player_pp if side == BattleSide.PLAYER else self.bot_pp

    def get_selected_move(self, side: BattleSide) -> BattleMove | None:
        return self.player_selected_move if side == BattleSide.PLAYER else self.bot_selected_move

    @property
    def current_message(self) -> str:
        return self.messages[-1] if self.messages else ""
