from src.battle_arena.constants import HEALTH_BAR_GREEN_THRESHOLD, HEALTH_BAR_YELLOW_THRESHOLD, MSG_CRITICAL_HIT
from src.battle_arena.enums import BattleSide, EffectivenessTier
from src.battle_arena.type_effectiveness import TypeEffectiveness

_EFFECTIVENESS_TEXT = {
    EffectivenessTier.NO_EFFECT: "No Effect",
    EffectivenessTier.NOT_VERY_EFFECTIVE: "Not Very Effective",
    EffectivenessTier.SUPER_EFFECTIVE: "Super Effective",
    EffectivenessTier.NORMAL: "Normal",
}


def get_effectiveness_text(effectiveness: float | None) -> str:
    """Short label for a move-effectiveness badge; empty when nothing was computed"""
    if effectiveness is None:
        return ""
    return _EFFECTIVENESS_TEXT[TypeEffectiveness.get_effectiveness_tier(effectiveness)]


def get_health_bar_color(hp_percent: float) -> str:
    if hp_percent > HEALTH_BAR_GREEN_THRESHOLD:
        return "green"
    if hp_percent > HEALTH_BAR_YELLOW_THRESHOLD:
        return "yellow"
    return "red"


def hp_percent(hp: int, max_hp: int) -> float:
    if max_hp <= 0:
        return 0.0
    return max(hp / max_hp * 100, 0.0)


# =================================================================
# BATTLE MESSAGES
# =================================================================


def battle_start_message(first_attacker: BattleSide, speed_tie: bool) -> str:
    if speed_tie:
        who = "you are" if first_attacker == BattleSide.PLAYER else "the opponent is"
        return f"The battle begins! Both Pokémon have equal speed. Randomly, {who} faster and will move first."
    who = "You are" if first_attacker == BattleSide.PLAYER else "The opponent is"
    return f"The battle begins! {who} faster and will move first."


def move_selected_message(move_name: str) -> str:
    return f"You chose {move_name}!"


def no_moves_left_message(name: str) -> str:
    return f"{name} has no moves left!"


def uses_move_message(attacker_name: str, move_name: str, side: BattleSide, faster: bool = False) -> str:
    """Announce an attack; on the speed-ordered first turn the faster side is called out"""
    if faster and side == BattleSide.PLAYER:
        return f"You're faster! {attacker_name} uses {move_name}!"
    if faster:
        return f"{attacker_name} is faster! It uses {move_name}!"
    return f"{attacker_name} uses {move_name}!"


def attack_result_message(attacker_name: str, damage: int, effectiveness: float, critical: bool) -> str:
    """
    Follow-up line after an attack lands. Effectiveness wins over the
    critical-hit line, which wins over the plain damage line.
    """
    tier = TypeEffectiveness.get_effectiveness_tier(effectiveness)
    if tier != EffectivenessTier.NORMAL:
        return TypeEffectiveness.get_effectiveness_description(effectiveness)
    if critical:
        return MSG_CRITICAL_HIT
    if damage > 0:
        return f"{attacker_name} dealt {damage} damage!"
    return f"{attacker_name}'s move had no effect!"


def faint_message(fainted_name: str) -> str:
    return f"{fainted_name} fainted!"


def victory_message(winner: BattleSide) -> str:
    return "You won the battle!" if winner == BattleSide.PLAYER else "You lost the battle!"


def next_turn_message(turn: int) -> str:
    return f"Turn {turn}. Choose your move!"
