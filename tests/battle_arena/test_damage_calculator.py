from src.battle_arena.damage_calculator import DamageCalculator, calculate_base_damage
from src.battle_arena.enums import MoveCategory
from src.battle_arena.utils.mon_factory import create_combatant, create_move
from src.battle_arena.utils.rng import RandomSource

TACKLE = create_move(1, "Tackle", "normal", power=40)
GROWL = create_move(2, "Growl", "normal", power=0, category=MoveCategory.STATUS)
THUNDERBOLT = create_move(3, "Thunderbolt", "electric", power=90, category=MoveCategory.SPECIAL)
EMBER = create_move(4, "Ember", "fire", power=40, category=MoveCategory.SPECIAL)


def make_attacker(**overrides):
    stats = dict(types=["normal"], hp=50, attack=60, defense=50, special_attack=50, special_defense=50, speed=100, moves=[TACKLE])
    stats.update(overrides)
    return create_combatant("Attacker", **stats)


def make_defender(**overrides):
    stats = dict(types=["water"], hp=50, attack=50, defense=50, special_attack=50, special_defense=50, speed=50, moves=[TACKLE])
    stats.update(overrides)
    return create_combatant("Defender", **stats)


def test_base_damage_uses_level_50_formula():
    # floor(0.44 * (60 / 50) * 40 + 2) = floor(23.12)
    assert calculate_base_damage(TACKLE, make_attacker(), make_defender()) == 23


def test_stab_no_crit_minimum_roll(scripted_rng):
    # no crit, lowest roll: floor(floor(23 * 1.5) * 0.85) = floor(34 * 0.85) = 28
    calc = DamageCalculator(scripted_rng(0.5, 0.0))
    result = calc.calculate(TACKLE, make_attacker(), make_defender())

    assert result.damage == 28
    assert result.effectiveness == 1.0
    assert result.isCritical is False


def test_critical_hit_multiplies_before_the_roll(scripted_rng):
    # crit: floor(34 * 1.5) = 51, lowest roll: floor(51 * 0.85) = 43
    calc = DamageCalculator(scripted_rng(0.0, 0.0))
    result = calc.calculate(TACKLE, make_attacker(), make_defender())

    assert result.isCritical is True
    assert result.damage == 43


def test_damage_stays_inside_range_for_many_seeds():
    attacker, defender = make_attacker(), make_defender()
    low, _ = DamageCalculator.damage_range(TACKLE, attacker, defender)
    _, high = DamageCalculator.damage_range(TACKLE, attacker, defender, critical=True)
    assert (low, high) == (28, 51)

    for seed in range(200):
        result = DamageCalculator(RandomSource(seed=seed)).calculate(TACKLE, attacker, defender)
        assert low <= result.damage <= high


def test_status_move_does_nothing_and_draws_nothing():
    rng = RandomSource(seed=42)
    result = DamageCalculator(rng).calculate(GROWL, make_attacker(), make_defender())

    assert result.damage == 0
    assert result.effectiveness == 1.0
    assert result.isCritical is False
    assert rng.seed == 42


def test_immune_defender_takes_zero_even_on_crit_and_max_roll(scripted_rng):
    calc = DamageCalculator(scripted_rng(0.0, 0.999))
    result = calc.calculate(THUNDERBOLT, make_attacker(special_attack=255), make_defender(types=["ground"]))

    assert result.effectiveness == 0.0
    assert result.damage == 0


def test_normal_move_cannot_touch_ghost(scripted_rng):
    calc = DamageCalculator(scripted_rng(0.5, 0.5))
    result = calc.calculate(TACKLE, make_attacker(), make_defender(types=["ghost"]))

    assert result.damage == 0


def test_effective_hit_deals_at_least_one(scripted_rng):
    # base floor(0.44 * (1 / 255) * 40 + 2) = 2, then 0.25x -> 0 before the clamp
    calc = DamageCalculator(scripted_rng(0.5, 0.0))
    attacker = make_attacker(types=["water"], special_attack=1)
    defender = make_defender(types=["grass", "dragon"], special_defense=255)
    result = calc.calculate(EMBER, attacker, defender)

    assert result.effectiveness == 1.0
    assert result.damage >= 1

    calc = DamageCalculator(scripted_rng(0.5, 0.0))
    resisted = calc.calculate(EMBER, attacker, make_defender(types=["water", "rock"], special_defense=255))
    assert resisted.effectiveness == 0.25
    assert resisted.damage == 1


def test_physical_and_special_use_their_own_stats():
    attacker = make_attacker(attack=10, special_attack=200)
    defender = make_defender(defense=200, special_defense=10)

    physical_low, _ = DamageCalculator.damage_range(TACKLE, attacker, defender)
    special_low, _ = DamageCalculator.damage_range(EMBER, attacker, defender)

    assert special_low > physical_low * 10


def test_zero_defense_does_not_divide_by_zero():
    result = DamageCalculator(RandomSource(seed=3)).calculate(TACKLE, make_attacker(), make_defender(defense=0))
    assert result.damage > 0


def test_super_effective_damage(scripted_rng):
    # base floor(0.44 * 1 * 40 + 2) = 19, STAB -> 28, x2 -> 56, floor(56 * 0.85) = 47
    calc = DamageCalculator(scripted_rng(0.5, 0.0))
    attacker = make_attacker(types=["fire"], special_attack=50)
    result = calc.calculate(EMBER, attacker, make_defender(types=["grass"]))

    assert result.effectiveness == 2.0
    assert result.damage == 47
