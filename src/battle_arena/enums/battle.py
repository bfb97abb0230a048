from enum import Enum


class BattleStatus(str, Enum):
    """Public state of a battle session"""

    READY = "ready"
    PLAYER_TURN = "player-turn"
    BOT_TURN = "bot-turn"
    PLAYER_WON = "player-won"
    BOT_WON = "bot-won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (BattleStatus.PLAYER_WON, BattleStatus.BOT_WON, BattleStatus.DRAW)


class BattleSide(str, Enum):
    PLAYER = "player"
    BOT = "bot"

    @property
    def opponent(self) -> "BattleSide":
        return BattleSide.BOT if self == BattleSide.PLAYER else BattleSide.PLAYER


class EffectivenessTier(str, Enum):
    NO_EFFECT = "no-effect"
    NOT_VERY_EFFECTIVE = "not-very-effective"
    NORMAL = "normal"
    SUPER_EFFECTIVE = "super-effective"


class BattleEventKind(str, Enum):
    """Discrete step boundaries a consumer can pace its presentation on"""

    BATTLE_START = "battle-start"
    MOVE_SELECTED = "move-selected"
    NO_MOVES_LEFT = "no-moves-left"
    ATTACK = "attack"
    FAINT = "faint"
    TURN_COMPLETE = "turn-complete"
    BATTLE_END = "battle-end"
