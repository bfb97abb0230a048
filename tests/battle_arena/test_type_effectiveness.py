import itertools

import pytest

from src.battle_arena.enums import EffectivenessTier, Type
from src.battle_arena.type_effectiveness import TYPE_EFFECTIVENESS_CHART, TypeEffectiveness

ALL_TYPES = [t.value for t in Type]


def test_single_type_multipliers():
    assert TypeEffectiveness.get_effectiveness("fire", ["grass"]) == 2.0
    assert TypeEffectiveness.get_effectiveness("fire", ["water"]) == 0.5
    assert TypeEffectiveness.get_effectiveness("fire", ["normal"]) == 1.0


def test_dual_types_multiply_without_cap():
    # Ice vs Dragon/Flying is doubly super effective
    assert TypeEffectiveness.get_effectiveness("ice", ["dragon", "flying"]) == 4.0
    # Grass vs Fire/Flying is doubly resisted
    assert TypeEffectiveness.get_effectiveness("grass", ["fire", "flying"]) == 0.25
    # A weakness and a resistance cancel out
    assert TypeEffectiveness.get_effectiveness("water", ["fire", "dragon"]) == 1.0


@pytest.mark.parametrize(
    "attacking, defending",
    [
        ("electric", ["ground"]),
        ("electric", ["water", "ground"]),
        ("electric", ["ground", "flying"]),
        ("normal", ["ghost"]),
        ("normal", ["ghost", "poison"]),
    ],
)
def test_immunities_are_exactly_zero(attacking, defending):
    assert TypeEffectiveness.get_effectiveness(attacking, defending) == 0.0
    assert TypeEffectiveness.is_immune(attacking, defending)


def test_unknown_attacking_type_is_neutral():
    assert TypeEffectiveness.get_effectiveness("shadow", ["ghost"]) == 1.0
    assert TypeEffectiveness.get_effectiveness("shadow", ["ground", "steel"]) == 1.0


def test_unknown_defending_type_is_neutral():
    assert TypeEffectiveness.get_effectiveness("fire", ["stellar"]) == 1.0


def test_simplified_chart_is_kept_as_is():
    # The chart is a simplified subset: fighting vs ghost and ghost vs normal are not immunities here
    assert TypeEffectiveness.get_effectiveness("fighting", ["ghost"]) == 1.0
    assert TypeEffectiveness.get_effectiveness("ghost", ["normal"]) == 0.5


def test_every_pair_lands_on_an_allowed_multiplier():
    allowed = {0.0, 0.25, 0.5, 1.0, 2.0, 4.0}
    for attacking in ALL_TYPES:
        for first, second in itertools.combinations_with_replacement(ALL_TYPES, 2):
            defending = [first] if first == second else [first, second]
            assert TypeEffectiveness.get_effectiveness(attacking, defending) in allowed


def test_chart_covers_all_known_types():
    assert set(TYPE_EFFECTIVENESS_CHART) == set(ALL_TYPES)


def test_stab():
    assert TypeEffectiveness.calculate_stab("fire", ["fire", "flying"]) == 1.5
    assert TypeEffectiveness.calculate_stab("water", ["fire", "flying"]) == 1.0


def test_effectiveness_tiers_and_descriptions():
    assert TypeEffectiveness.get_effectiveness_tier(0.0) == EffectivenessTier.NO_EFFECT
    assert TypeEffectiveness.get_effectiveness_tier(0.25) == EffectivenessTier.NOT_VERY_EFFECTIVE
    assert TypeEffectiveness.get_effectiveness_tier(1.0) == EffectivenessTier.NORMAL
    assert TypeEffectiveness.get_effectiveness_tier(4.0) == EffectivenessTier.SUPER_EFFECTIVE

    assert TypeEffectiveness.get_effectiveness_description(0.0) == "It has no effect..."
    assert TypeEffectiveness.get_effectiveness_description(0.5) == "It's not very effective..."
    assert TypeEffectiveness.get_effectiveness_description(2.0) == "It's super effective!"
    assert TypeEffectiveness.get_effectiveness_description(1.0) == ""


def test_known_types():
    assert TypeEffectiveness.is_known_type("fire")
    assert not TypeEffectiveness.is_known_type("shadow")
    assert all(TypeEffectiveness.is_known_type(t) for t in TYPE_EFFECTIVENESS_CHART)
