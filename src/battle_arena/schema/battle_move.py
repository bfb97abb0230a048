from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.battle_arena.constants import STRUGGLE_ACCURACY, STRUGGLE_MOVE_ID, STRUGGLE_NAME, STRUGGLE_POWER, STRUGGLE_PP, STRUGGLE_TYPE
from src.battle_arena.enums import MoveCategory


class BattleMove(BaseModel):
    """A move as supplied by the catalog. Immutable for the whole match."""

    model_config = ConfigDict(frozen=True)

    id: int  # unique within a combatant's move set, -1 is Struggle
    name: str = Field(min_length=1)
    type: str  # type tag, e.g. "fire"
    power: int = Field(ge=0)  # 0 for status moves
    accuracy: int = Field(ge=0)  # carried for display, every damaging move lands
    pp: int = Field(ge=0)  # base PP - maximum number of uses, 0 starts exhausted
    category: MoveCategory

    @field_validator("type")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def is_struggle(self) -> bool:
        return self.id == STRUGGLE_MOVE_ID

    @property
    def is_status(self) -> bool:
        return self.power == 0


STRUGGLE = BattleMove(
    id=STRUGGLE_MOVE_ID,
    name=STRUGGLE_NAME,
    type=STRUGGLE_TYPE,
    power=STRUGGLE_POWER,
    accuracy=STRUGGLE_ACCURACY,
    pp=STRUGGLE_PP,
    category=MoveCategory.PHYSICAL,
)
