import pytest

from src.battle_arena.utils.rng import RandomSource


class ScriptedRandom(RandomSource):
    """RandomSource that replays queued rolls before falling back to the LCG stream"""

    rolls: list[float] = []

    def roll(self) -> float:
        if self.rolls:
            return self.rolls.pop(0)
        return super().roll()


@pytest.fixture
def scripted_rng():
    def _make(*rolls: float, seed: int = 1) -> ScriptedRandom:
        return ScriptedRandom(seed=seed, rolls=list(rolls))

    return _make
