from typing import Any, Iterable, Optional

from pydantic import ValidationError

from src.battle_arena.constants import DEFAULT_MOVE_ACCURACY, DEFAULT_MOVE_PP, DEFAULT_MOVE_POWER, MAX_MON_MOVES
from src.battle_arena.enums import MoveCategory
from src.battle_arena.errors import InvalidCombatantError
from src.battle_arena.schema.battle_move import BattleMove
from src.battle_arena.schema.combatant import Combatant

# Catalog stat names -> Combatant fields
CATALOG_STAT_FIELDS = {
    "hp": "hp",
    "attack": "attack",
    "defense": "defense",
    "special-attack": "specialAttack",
    "special-defense": "specialDefense",
    "speed": "speed",
}


def create_move(
    move_id: int,
    name: str,
    move_type: str = "normal",
    power: int = 40,
    category: MoveCategory | str = MoveCategory.PHYSICAL,
    pp: int = 35,
    accuracy: int = 100,
) -> BattleMove:
    return BattleMove(id=move_id, name=name, type=move_type, power=power, accuracy=accuracy, pp=pp, category=category)


def create_combatant(
    name: str,
    types: Iterable[str] = ("normal",),
    hp: int = 50,
    attack: int = 50,
    defense: int = 50,
    special_attack: int = 50,
    special_defense: int = 50,
    speed: int = 50,
    moves: Iterable[BattleMove] | None = None,
    combatant_id: int = 0,
) -> Combatant:
    try:
        return Combatant(
            id=combatant_id,
            name=name,
            types=list(types),
            hp=hp,
            attack=attack,
            defense=defense,
            specialAttack=special_attack,
            specialDefense=special_defense,
            speed=speed,
            moves=list(moves or [])[:MAX_MON_MOVES],
        )
    except ValidationError as e:
        raise InvalidCombatantError(name, str(e)) from e


def move_from_catalog(payload: dict[str, Any]) -> BattleMove:
    """
    Convert a catalog move-detail payload into a BattleMove

    Missing power/accuracy/pp/damage class fall back to 0/100/10/physical;
    the first hyphen of the name becomes a space ("vine-whip" -> "vine whip").
    """
    damage_class = payload.get("damage_class") or {}
    return BattleMove(
        id=payload["id"],
        name=payload["name"].replace("-", " ", 1),
        type=payload["type"]["name"],
        power=payload.get("power") or DEFAULT_MOVE_POWER,
        accuracy=payload.get("accuracy") or DEFAULT_MOVE_ACCURACY,
        pp=payload.get("pp") or DEFAULT_MOVE_PP,
        category=damage_class.get("name") or MoveCategory.PHYSICAL,
    )


def combatant_from_catalog(payload: dict[str, Any], move_payloads: Optional[Iterable[dict[str, Any]]] = None) -> Combatant:
    """
    Build a Combatant from a catalog creature payload

    Args:
        payload: Creature record with ``id``, ``name``, ``types`` and ``stats`` lists
        move_payloads: Move-detail records for the creature's moves; only the first four are used

    Raises:
        InvalidCombatantError: a stat is missing or any field fails validation.
            HP-affecting fields are never defaulted.
    """
    name = str(payload.get("name", "<unnamed>"))
    try:
        base_stats = {entry["stat"]["name"]: entry["base_stat"] for entry in payload["stats"]}
        stats = {}
        for stat_name, field_name in CATALOG_STAT_FIELDS.items():
            if stat_name not in base_stats:
                raise InvalidCombatantError(name, f"missing stat '{stat_name}'")
            stats[field_name] = base_stats[stat_name]

        moves = [move_from_catalog(move) for move in list(move_payloads or [])[:MAX_MON_MOVES]]

        return Combatant(
            id=payload["id"],
            name=payload["name"],
            types=[entry["type"]["name"] for entry in payload["types"]],
            moves=moves,
            **stats,
        )
    except (KeyError, TypeError) as e:
        raise InvalidCombatantError(name, f"malformed record: {e!r}") from e
    except ValidationError as e:
        raise InvalidCombatantError(name, str(e)) from e
