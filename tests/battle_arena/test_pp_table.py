from src.battle_arena.schema.battle_move import STRUGGLE
from src.battle_arena.schema.pp_table import PPTable
from src.battle_arena.utils.mon_factory import create_move

SCRATCH = create_move(1, "Scratch", pp=2)
GROWL = create_move(2, "Growl", power=0, category="status", pp=1)


def test_consume_floors_at_zero():
    table = PPTable.from_moves([SCRATCH, GROWL])

    assert table.consume(SCRATCH.id) == 1
    assert table.consume(SCRATCH.id) == 0
    assert table.consume(SCRATCH.id) == 0
    assert table.as_dict() == {SCRATCH.id: 0, GROWL.id: 1}
    assert table.base == {SCRATCH.id: 2, GROWL.id: 1}


def test_untracked_ids_are_ignored():
    table = PPTable.from_moves([SCRATCH])

    assert table.consume(STRUGGLE.id) == 0
    assert table.get(STRUGGLE.id) == 0
    assert table.as_dict() == {SCRATCH.id: 2}


def test_has_any():
    table = PPTable.from_moves([GROWL])
    assert table.has_any()
    table.consume(GROWL.id)
    assert not table.has_any()
    assert not PPTable.from_moves([]).has_any()


def test_as_dict_is_a_copy():
    table = PPTable.from_moves([SCRATCH])
    table.as_dict()[SCRATCH.id] = 0
    assert table.get(SCRATCH.id) == 2
