"""
Damage calculation for a single attack

Implements a fixed-level (level 50) single-generation damage formula:

    base = floor(((2 * 50 + 10) / 250) * (attack / defense) * power + 2)

followed by the same-type bonus, type effectiveness, the critical hit and the
final 85-100% damage roll. The running value is floored after each of those
multiplicative steps.

Key design principles:
- No side effects: the only state touched is the injected random source
- Exactly two random draws per damaging move (critical roll, then damage roll)
- Status moves (power 0) draw nothing
"""

import logging
import math

from src.battle_arena.constants import (
    BASE_DAMAGE_BONUS,
    CRITICAL_HIT_CHANCE,
    CRITICAL_HIT_MULTIPLIER,
    DAMAGE_ROLL_MAX,
    DAMAGE_ROLL_MIN,
    LEVEL_FACTOR,
    TYPE_MUL_NO_EFFECT,
    TYPE_MUL_NORMAL,
)
from src.battle_arena.enums import MoveCategory
from src.battle_arena.schema.battle_move import BattleMove
from src.battle_arena.schema.battle_result import DamageResult
from src.battle_arena.schema.combatant import Combatant
from src.battle_arena.type_effectiveness import TypeEffectiveness
from src.battle_arena.utils.rng import RandomSource

logger = logging.getLogger(__name__)


def get_attack_and_defense(move: BattleMove, attacker: Combatant, defender: Combatant) -> tuple[int, int]:
    """Pick the stat pair for a move's category. Physical uses Attack/Defense, everything else the special pair."""
    if move.category == MoveCategory.PHYSICAL:
        return attacker.attack, defender.defense
    return attacker.specialAttack, defender.specialDefense


def calculate_base_damage(move: BattleMove, attacker: Combatant, defender: Combatant) -> int:
    """Level-50 base damage before any multiplier"""
    attack, defense = get_attack_and_defense(move, attacker, defender)
    # A zero defense stat would divide by zero; treat it as the smallest real stat
    defense = max(defense, 1)
    return math.floor(LEVEL_FACTOR * (attack / defense) * move.power + BASE_DAMAGE_BONUS)


def apply_final_roll(damage: int, roll: float, effectiveness: float) -> int:
    """
    Apply the 85-100% damage roll and clamp the result.

    An immune defender always takes exactly 0; anything else takes at least 1.
    """
    if effectiveness == TYPE_MUL_NO_EFFECT:
        return 0
    return max(math.floor(damage * roll), 1)


class DamageCalculator:
    """
    Damage calculator for one attacker/defender/move triple

    The calculator keeps no state of its own; repeated calls with the same
    inputs differ only through the critical roll and the damage roll.
    """

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def calculate(self, move: BattleMove, attacker: Combatant, defender: Combatant) -> DamageResult:
        """
        Calculate damage, effectiveness and critical flag for one attack

        Args:
            move: Move being used
            attacker: Attacking combatant
            defender: Defending combatant

        Returns:
            DamageResult with damage >= 0
        """
        # Status moves do nothing and roll nothing
        if move.power == 0:
            return DamageResult(damage=0, effectiveness=TYPE_MUL_NORMAL, isCritical=False)

        damage = calculate_base_damage(move, attacker, defender)

        # Same-type attack bonus
        stab = TypeEffectiveness.calculate_stab(move.type, attacker.types)
        damage = math.floor(damage * stab)

        # Type effectiveness
        effectiveness = TypeEffectiveness.get_effectiveness(move.type, defender.types)
        damage = math.floor(damage * effectiveness)

        # Critical hit
        is_critical = self.roll_critical()
        if is_critical:
            damage = math.floor(damage * CRITICAL_HIT_MULTIPLIER)

        # Random 85-100% roll
        roll = self.rng.uniform(DAMAGE_ROLL_MIN, DAMAGE_ROLL_MAX)
        damage = apply_final_roll(damage, roll, effectiveness)

        logger.debug("%s -> %s with %s: damage=%d effectiveness=%s critical=%s", attacker.name, defender.name, move.name, damage, effectiveness, is_critical)
        return DamageResult(damage=damage, effectiveness=effectiveness, isCritical=is_critical)

    def roll_critical(self) -> bool:
        """Independent 1-in-16 critical hit roll"""
        return self.rng.chance(CRITICAL_HIT_CHANCE)

    @staticmethod
    def damage_range(move: BattleMove, attacker: Combatant, defender: Combatant, critical: bool = False) -> tuple[int, int]:
        """
        Lowest and highest damage a move can deal, without drawing anything.

        Returns (0, 0) for status moves and immune defenders.
        """
        if move.power == 0:
            return 0, 0

        damage = calculate_base_damage(move, attacker, defender)
        damage = math.floor(damage * TypeEffectiveness.calculate_stab(move.type, attacker.types))
        effectiveness = TypeEffectiveness.get_effectiveness(move.type, defender.types)
        damage = math.floor(damage * effectiveness)
        if critical:
            damage = math.floor(damage * CRITICAL_HIT_MULTIPLIER)

        return apply_final_roll(damage, DAMAGE_ROLL_MIN, effectiveness), apply_final_roll(damage, DAMAGE_ROLL_MAX, effectiveness)
