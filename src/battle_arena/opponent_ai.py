import logging

from pydantic import BaseModel, ConfigDict

from src.battle_arena.constants import AI_EXPLORATION_RATE, AI_JITTER_MAX, AI_JITTER_MIN
from src.battle_arena.schema.battle_move import STRUGGLE, BattleMove
from src.battle_arena.schema.combatant import Combatant
from src.battle_arena.schema.pp_table import PPTable
from src.battle_arena.type_effectiveness import TypeEffectiveness
from src.battle_arena.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class MoveScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    move: BattleMove
    score: float


def get_usable_moves(user: Combatant, user_pp: PPTable) -> list[BattleMove]:
    """Damaging moves that still have PP, in move-set order"""
    return [move for move in user.moves if user_pp.get(move.id) > 0 and move.power > 0]


def expected_damage(move: BattleMove, user: Combatant, opponent: Combatant) -> float:
    """Power weighted by effectiveness and same-type bonus - no stats involved"""
    effectiveness = TypeEffectiveness.get_effectiveness(move.type, opponent.types)
    stab = TypeEffectiveness.calculate_stab(move.type, user.types)
    return move.power * effectiveness * stab


class OpponentAI:
    """
    Move selection for the computer-controlled side

    Scores every usable move by expected damage with a little noise, then
    usually plays the best one and occasionally a random one so it is not
    fully predictable. Selection is advisory only: the PP table is read,
    never written.
    """

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def score_moves(self, user: Combatant, opponent: Combatant, user_pp: PPTable) -> list[MoveScore]:
        """Score usable moves, best first. One jitter draw per candidate, in move-set order."""
        scores = []
        for move in get_usable_moves(user, user_pp):
            jitter = self.rng.uniform(AI_JITTER_MIN, AI_JITTER_MAX)
            scores.append(MoveScore(move=move, score=expected_damage(move, user, opponent) * jitter))

        # sorted() is stable, equal scores keep move-set order
        return sorted(scores, key=lambda entry: entry.score, reverse=True)

    def select_move(self, user: Combatant, opponent: Combatant, user_pp: PPTable) -> BattleMove:
        """
        Pick the move the opponent uses this turn

        Args:
            user: The AI-controlled combatant
            opponent: The combatant it is attacking
            user_pp: The AI side's remaining uses

        Returns:
            The chosen move, or Struggle when no damaging move has PP left
        """
        candidates = get_usable_moves(user, user_pp)
        if not candidates:
            logger.debug("%s has no usable moves, falling back to %s", user.name, STRUGGLE.name)
            return STRUGGLE

        ranked = self.score_moves(user, opponent, user_pp)

        if self.rng.chance(AI_EXPLORATION_RATE):
            choice = candidates[self.rng.choice_index(len(candidates))]
            logger.debug("%s explores: picked %s at random", user.name, choice.name)
            return choice

        logger.debug("%s picks best move %s (score %.1f)", user.name, ranked[0].move.name, ranked[0].score)
        return ranked[0].move
