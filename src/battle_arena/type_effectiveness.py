from typing import Iterable

from src.battle_arena.constants import (
    MSG_NO_EFFECT,
    MSG_NOT_VERY_EFFECTIVE,
    MSG_SUPER_EFFECTIVE,
    NO_STAB_MULTIPLIER,
    STAB_MULTIPLIER,
    TYPE_MUL_NO_EFFECT,
    TYPE_MUL_NORMAL,
    TYPE_MUL_NOT_EFFECTIVE,
    TYPE_MUL_SUPER_EFFECTIVE,
)
from src.battle_arena.enums import EffectivenessTier, Type

KNOWN_TYPES: frozenset[str] = frozenset(t.value for t in Type)

# Simplified chart: attacking type -> (super effective against, not very effective against)
# Pairs that are not listed are neutral, and so is any attacking type missing from the chart.
TYPE_EFFECTIVENESS_CHART: dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "normal": (
        frozenset(),
        frozenset({"rock", "steel"}),
    ),
    "fire": (
        frozenset({"grass", "ice", "bug", "steel"}),
        frozenset({"fire", "water", "rock", "dragon"}),
    ),
    "water": (
        frozenset({"fire", "ground", "rock"}),
        frozenset({"water", "grass", "dragon"}),
    ),
    "electric": (
        frozenset({"water", "flying"}),
        frozenset({"electric", "grass", "dragon", "ground"}),
    ),
    "grass": (
        frozenset({"water", "ground", "rock"}),
        frozenset({"fire", "grass", "poison", "flying", "bug", "dragon", "steel"}),
    ),
    "ice": (
        frozenset({"grass", "ground", "flying", "dragon"}),
        frozenset({"fire", "water", "ice", "steel"}),
    ),
    "fighting": (
        frozenset({"normal", "ice", "rock", "dark", "steel"}),
        frozenset({"poison", "flying", "psychic", "bug", "fairy"}),
    ),
    "poison": (
        frozenset({"grass", "fairy"}),
        frozenset({"poison", "ground", "rock", "ghost", "steel"}),
    ),
    "ground": (
        frozenset({"fire", "electric", "poison", "rock", "steel"}),
        frozenset({"grass", "bug", "flying"}),
    ),
    "flying": (
        frozenset({"grass", "fighting", "bug"}),
        frozenset({"electric", "rock", "steel"}),
    ),
    "psychic": (
        frozenset({"fighting", "poison"}),
        frozenset({"psychic", "steel", "dark"}),
    ),
    "bug": (
        frozenset({"grass", "psychic", "dark"}),
        frozenset({"fire", "fighting", "poison", "flying", "ghost", "steel", "fairy"}),
    ),
    "rock": (
        frozenset({"fire", "ice", "flying", "bug"}),
        frozenset({"fighting", "ground", "steel"}),
    ),
    "ghost": (
        frozenset({"psychic", "ghost"}),
        frozenset({"dark", "normal"}),
    ),
    "dragon": (
        frozenset({"dragon"}),
        frozenset({"steel", "fairy"}),
    ),
    "dark": (
        frozenset({"psychic", "ghost"}),
        frozenset({"fighting", "dark", "fairy"}),
    ),
    "steel": (
        frozenset({"ice", "rock", "fairy"}),
        frozenset({"fire", "water", "electric", "steel"}),
    ),
    "fairy": (
        frozenset({"fighting", "dragon", "dark"}),
        frozenset({"fire", "poison", "steel"}),
    ),
}

# Immunities always win over the chart, whatever the other defending type is
TYPE_IMMUNITIES: frozenset[tuple[str, str]] = frozenset(
    {
        ("electric", "ground"),
        ("normal", "ghost"),
    }
)


class TypeEffectiveness:
    """
    Type effectiveness calculator

    Multipliers of a dual-type defender are applied independently and are not
    capped, so the combined value is one of 0, 0.25, 0.5, 1, 2 or 4.
    """

    @staticmethod
    def get_single_effectiveness(attacking_type: str, defending_type: str) -> float:
        """
        Get the multiplier of one attacking type against one defending type.

        Returns:
            TYPE_MUL_NO_EFFECT (0.0) for immune
            TYPE_MUL_NOT_EFFECTIVE (0.5) for not very effective
            TYPE_MUL_NORMAL (1.0) for normal effectiveness
            TYPE_MUL_SUPER_EFFECTIVE (2.0) for super effective
        """
        if (attacking_type, defending_type) in TYPE_IMMUNITIES:
            return TYPE_MUL_NO_EFFECT

        entry = TYPE_EFFECTIVENESS_CHART.get(attacking_type)
        if entry is None:
            return TYPE_MUL_NORMAL

        strengths, weaknesses = entry
        multiplier = TYPE_MUL_NORMAL
        if defending_type in strengths:
            multiplier *= TYPE_MUL_SUPER_EFFECTIVE
        if defending_type in weaknesses:
            multiplier *= TYPE_MUL_NOT_EFFECTIVE
        return multiplier

    @staticmethod
    def get_effectiveness(attacking_type: str, defending_types: Iterable[str]) -> float:
        """
        Combined multiplier of an attacking type against every defending type.

        Args:
            attacking_type: The type of the attacking move
            defending_types: The defender's types (one or two tags)
        """
        if not TypeEffectiveness.is_known_type(attacking_type):
            return TYPE_MUL_NORMAL

        effectiveness = TYPE_MUL_NORMAL
        for defending_type in defending_types:
            single = TypeEffectiveness.get_single_effectiveness(attacking_type, defending_type)
            if single == TYPE_MUL_NO_EFFECT:
                return TYPE_MUL_NO_EFFECT
            effectiveness *= single
        return effectiveness

    @staticmethod
    def is_known_type(type_tag: str) -> bool:
        return type_tag in KNOWN_TYPES

    @staticmethod
    def calculate_stab(move_type: str, attacker_types: Iterable[str]) -> float:
        """Same-type attack bonus: 1.5 when the move shares a type with its user"""
        return STAB_MULTIPLIER if move_type in attacker_types else NO_STAB_MULTIPLIER

    @staticmethod
    def is_immune(attacking_type: str, defending_types: Iterable[str]) -> bool:
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_types) == TYPE_MUL_NO_EFFECT

    @staticmethod
    def get_effectiveness_tier(multiplier: float) -> EffectivenessTier:
        if multiplier == TYPE_MUL_NO_EFFECT:
            return EffectivenessTier.NO_EFFECT
        elif multiplier < TYPE_MUL_NORMAL:
            return EffectivenessTier.NOT_VERY_EFFECTIVE
        elif multiplier > TYPE_MUL_NORMAL:
            return EffectivenessTier.SUPER_EFFECTIVE
        else:
            return EffectivenessTier.NORMAL

    @staticmethod
    def get_effectiveness_description(multiplier: float) -> str:
        """Get the battle message for an effectiveness multiplier"""
        tier = TypeEffectiveness.get_effectiveness_tier(multiplier)

        if tier == EffectivenessTier.NO_EFFECT:
            return MSG_NO_EFFECT
        elif tier == EffectivenessTier.NOT_VERY_EFFECTIVE:
            return MSG_NOT_VERY_EFFECTIVE
        elif tier == EffectivenessTier.SUPER_EFFECTIVE:
            return MSG_SUPER_EFFECTIVE
        else:
            return ""  # Normal effectiveness - no message
