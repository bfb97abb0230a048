import time

from pydantic import BaseModel, Field

_LCG_MULTIPLIER = 1664525
_LCG_INCREMENT = 1013904223
_LCG_MASK = 0xFFFFFFFF
_LCG_MODULUS = 1 << 32


class RandomSource(BaseModel):
    """Seedable random source shared by every random draw of a battle.

    Uses the classic 32-bit LCG: seed = (seed * 1664525 + 1013904223) mod 2^32.
    All higher-level draws go through ``roll`` so a test can replace the stream
    by overriding that single method.
    """

    seed: int = Field(ge=0, le=_LCG_MASK, default=0)

    @classmethod
    def from_seed(cls, seed: int | None = None) -> "RandomSource":
        """Build a source; defaults to a time-based seed when none is given."""
        return cls(seed=(seed if seed is not None else int(time.time())) & _LCG_MASK)

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * _LCG_MULTIPLIER + _LCG_INCREMENT) & _LCG_MASK
        return self.seed

    def rand16(self) -> int:
        """Advance and return the upper 16 bits (0..65535)."""
        return (self.advance() >> 16) & 0xFFFF

    def roll(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return self.advance() / _LCG_MODULUS

    def uniform(self, low: float, high: float) -> float:
        return low + self.roll() * (high - low)

    def chance(self, probability: float) -> bool:
        """True with the given probability. <= 0 never succeeds, >= 1 always does (no draw either way)."""
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return self.roll() < probability

    def choice_index(self, count: int) -> int:
        """Return a random index in range [0, count), or -1 when count is not positive."""
        if count <= 0:
            return -1
        return min(int(self.roll() * count), count - 1)
