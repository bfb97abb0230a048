from pydantic import BaseModel, ConfigDict, Field

from src.battle_arena.enums import BattleEventKind, BattleSide, BattleStatus
from src.battle_arena.schema.battle_move import BattleMove


class DamageResult(BaseModel):
    """Output of a single damage calculation"""

    model_config = ConfigDict(frozen=True)

    damage: int = Field(ge=0)
    effectiveness: float = Field(ge=0)
    isCritical: bool = False


class AttackOutcome(BaseModel):
    """Last attack as seen by the presentation layer - valid until the next step"""

    model_config = ConfigDict(frozen=True)

    moveId: int
    effectiveness: float
    critical: bool
    damage: int = Field(ge=0)
    attacker: BattleSide


class BattleSnapshot(BaseModel):
    """Read-only view of a session after a resolver step"""

    model_config = ConfigDict(frozen=True)

    turn: int
    status: BattleStatus
    playerHP: int
    playerMaxHP: int
    botHP: int
    botMaxHP: int
    playerHPPercent: float
    botHPPercent: float
    playerMovesPP: dict[int, int]
    botMovesPP: dict[int, int]
    lastPlayerMove: BattleMove | None = None
    lastBotMove: BattleMove | None = None
    lastAttackResult: AttackOutcome | None = None
    firstAttacker: BattleSide
    animating: bool
    hasMovesWithPP: bool
    isBattleOver: bool
    currentMessage: str = ""


class BattleEvent(BaseModel):
    """One step of the resolver, with its narration and the state right after it"""

    model_config = ConfigDict(frozen=True)

    kind: BattleEventKind
    message: str
    snapshot: BattleSnapshot
    side: BattleSide | None = None
    move: BattleMove | None = None
    outcome: AttackOutcome | None = None
