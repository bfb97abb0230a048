from src.battle_arena.enums.type import Type
from src.battle_arena.enums.move import MoveCategory
from src.battle_arena.enums.battle import BattleStatus, BattleSide, EffectivenessTier, BattleEventKind
