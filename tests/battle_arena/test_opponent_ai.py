import pytest

from src.battle_arena.enums import MoveCategory
from src.battle_arena.opponent_ai import OpponentAI, get_usable_moves
from src.battle_arena.schema.battle_move import STRUGGLE
from src.battle_arena.schema.pp_table import PPTable
from src.battle_arena.utils.mon_factory import create_combatant, create_move
from src.battle_arena.utils.rng import RandomSource

EMBER = create_move(1, "Ember", "fire", power=40, category=MoveCategory.SPECIAL, pp=25)
SURF = create_move(2, "Surf", "water", power=90, category=MoveCategory.SPECIAL, pp=15)
GROWL = create_move(3, "Growl", "normal", power=0, category=MoveCategory.STATUS, pp=40)


def make_user(moves=(EMBER, SURF, GROWL)):
    return create_combatant("Charmander", types=["fire"], moves=list(moves))


def make_target():
    return create_combatant("Bulbasaur", types=["grass", "poison"])


def test_picks_best_scored_move(scripted_rng):
    # Ember: 40 * 2 * 1.5 = 120, Surf: 90 * 0.5 * 1 = 45; neutral jitter, no exploration
    user = make_user()
    ai = OpponentAI(scripted_rng(0.5, 0.5, 0.9))

    assert ai.select_move(user, make_target(), PPTable.from_moves(user.moves)) == EMBER


def test_jitter_can_flip_close_scores(scripted_rng):
    user = make_user()
    target = create_combatant("Rattata", types=["normal"])
    ai = OpponentAI(scripted_rng(0.0, 0.999, 0.9))

    # Ember 40 * 1 * 1.5 * 0.8 = 48, Surf 90 * 1 * 1 * ~1.2 = ~108
    assert ai.select_move(user, target, PPTable.from_moves(user.moves)) == SURF


def test_exploration_picks_a_random_candidate(scripted_rng):
    user = make_user()
    # two jitters, exploration roll under 0.2, index roll 0.75 -> second candidate
    ai = OpponentAI(scripted_rng(0.5, 0.5, 0.1, 0.75))

    assert ai.select_move(user, make_target(), PPTable.from_moves(user.moves)) == SURF


def test_moves_without_pp_and_status_moves_are_skipped():
    user = make_user()
    pp = PPTable.from_moves(user.moves)
    for _ in range(EMBER.pp):
        pp.consume(EMBER.id)

    assert get_usable_moves(user, pp) == [SURF]
    for seed in range(20):
        assert OpponentAI(RandomSource(seed=seed)).select_move(user, make_target(), pp) == SURF


def test_struggle_when_nothing_is_usable():
    user = make_user(moves=(GROWL,))
    ai = OpponentAI(RandomSource(seed=5))

    move = ai.select_move(user, make_target(), PPTable.from_moves(user.moves))

    assert move == STRUGGLE
    assert move.id == -1
    assert (move.name, move.type, move.power, move.accuracy, move.pp) == ("Struggle", "normal", 40, 100, 1)
    assert move.category == MoveCategory.PHYSICAL


def test_selection_never_touches_pp():
    user = make_user()
    pp = PPTable.from_moves(user.moves)
    before = pp.as_dict()

    ai = OpponentAI(RandomSource(seed=9))
    for _ in range(50):
        ai.select_move(user, make_target(), pp)

    assert pp.as_dict() == before


def test_scores_are_sorted_best_first(scripted_rng):
    user = make_user()
    ai = OpponentAI(scripted_rng(0.5, 0.5))

    scores = ai.score_moves(user, make_target(), PPTable.from_moves(user.moves))

    assert [entry.move for entry in scores] == [EMBER, SURF]
    assert scores[0].score == pytest.approx(120.0)
    assert scores[1].score == pytest.approx(45.0)
