from typing import Iterable

from pydantic import BaseModel, Field

from src.battle_arena.schema.battle_move import BattleMove


class PPTable(BaseModel):
    """Remaining uses per move id for one side.

    Starts at each move's base PP and only ever goes down, one use at a time,
    through ``consume``. Ids that are not in the table (Struggle included) are
    never tracked.
    """

    base: dict[int, int] = Field(default_factory=dict)
    remaining: dict[int, int] = Field(default_factory=dict)

    @classmethod
    def from_moves(cls, moves: Iterable[BattleMove]) -> "PPTable":
        base = {move.id: move.pp for move in moves}
        return cls(base=base, remaining=dict(base))

    def get(self, move_id: int) -> int:
        return self.remaining.get(move_id, 0)

    def consume(self, move_id: int) -> int:
        """Spend one use of a move, floored at 0. Returns what is left."""
        if move_id not in self.remaining:
            return 0
        self.remaining[move_id] = max(0, self.remaining[move_id] - 1)
        return self.remaining[move_id]

    def has_any(self) -> bool:
        return any(left > 0 for left in self.remaining.values())

    def as_dict(self) -> dict[int, int]:
        return dict(self.remaining)
