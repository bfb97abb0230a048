from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.battle_arena.constants import HP_MULTIPLIER, MAX_MON_MOVES, MAX_MON_TYPES, STRUGGLE_MOVE_ID
from src.battle_arena.schema.battle_move import BattleMove


class Combatant(BaseModel):
    """One side's creature: base stats, types and a fixed move set"""

    model_config = ConfigDict(frozen=True)

    id: int = 0
    name: str = Field(min_length=1)
    types: list[str] = Field(min_length=1, max_length=MAX_MON_TYPES)

    # Base stats
    hp: int = Field(ge=0)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    specialAttack: int = Field(ge=0)
    specialDefense: int = Field(ge=0)
    speed: int = Field(ge=0)

    moves: list[BattleMove] = Field(default_factory=list, max_length=MAX_MON_MOVES)

    @field_validator("types")
    @classmethod
    def _normalize_types(cls, value: list[str]) -> list[str]:
        types = [t.strip().lower() for t in value]
        if len(set(types)) != len(types):
            raise ValueError(f"types must be distinct, got {types}")
        return types

    @field_validator("moves")
    @classmethod
    def _check_move_ids(cls, value: list[BattleMove]) -> list[BattleMove]:
        ids = [move.id for move in value]
        if STRUGGLE_MOVE_ID in ids:
            raise ValueError(f"move id {STRUGGLE_MOVE_ID} is reserved for Struggle")
        if len(set(ids)) != len(ids):
            raise ValueError(f"move ids must be unique, got {ids}")
        return value

    @property
    def max_hp(self) -> int:
        return int(self.hp * HP_MULTIPLIER)

    def get_move(self, move_id: int) -> BattleMove | None:
        return next((move for move in self.moves if move.id == move_id), None)
