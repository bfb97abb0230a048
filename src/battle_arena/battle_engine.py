import logging
from typing import Optional

from src.battle_arena import narration
from src.battle_arena.constants import FIRST_TURN
from src.battle_arena.damage_calculator import DamageCalculator
from src.battle_arena.enums import BattleEventKind, BattleSide, BattleStatus
from src.battle_arena.errors import InvalidTransitionError
from src.battle_arena.opponent_ai import OpponentAI
from src.battle_arena.schema.battle_move import STRUGGLE, BattleMove
from src.battle_arena.schema.battle_result import AttackOutcome, BattleEvent, BattleSnapshot
from src.battle_arena.schema.battle_state import BattleState
from src.battle_arena.schema.combatant import Combatant
from src.battle_arena.schema.pp_table import PPTable
from src.battle_arena.utils.rng import RandomSource

logger = logging.getLogger(__name__)

# Every edge the status machine may take. Terminal statuses have none.
STATUS_TRANSITIONS: dict[BattleStatus, frozenset[BattleStatus]] = {
    BattleStatus.READY: frozenset({BattleStatus.PLAYER_TURN}),
    BattleStatus.PLAYER_TURN: frozenset({BattleStatus.BOT_TURN, BattleStatus.PLAYER_WON, BattleStatus.BOT_WON, BattleStatus.DRAW}),
    BattleStatus.BOT_TURN: frozenset({BattleStatus.PLAYER_TURN, BattleStatus.PLAYER_WON, BattleStatus.BOT_WON, BattleStatus.DRAW}),
    BattleStatus.PLAYER_WON: frozenset(),
    BattleStatus.BOT_WON: frozenset(),
    BattleStatus.DRAW: frozenset(),
}


def determine_first_attacker(player: Combatant, bot: Combatant, rng: RandomSource) -> BattleSide:
    """Faster side leads turn 1; a speed tie is settled by one 50/50 draw"""
    if player.speed > bot.speed:
        return BattleSide.PLAYER
    if bot.speed > player.speed:
        return BattleSide.BOT
    return BattleSide.PLAYER if rng.roll() < 0.5 else BattleSide.BOT


class BattleEngine:
    """
    Turn resolver for a one-on-one battle

    The engine follows a simple loop driven by player commands:
    1. Player selects a move (PP spent immediately)
    2. Opponent AI picks its move (PP spent immediately)
    3. Turn order is fixed (speed on turn 1, player first afterwards)
    4. Attacks are applied one step at a time; a fainted side never acts
    5. The turn completes, or the battle ends

    Steps are exposed through ``begin_turn`` and ``advance`` so a consumer can
    pace its presentation between them; ``select_move`` runs a whole turn.
    Every step returns the events it produced.
    """

    def __init__(self):
        self.battle_state = BattleState()
        self.damage_calculator = DamageCalculator(self.battle_state.rng)
        self.opponent_ai = OpponentAI(self.battle_state.rng)

    def initialize_battle(self, player: Combatant, bot: Combatant, seed: Optional[int] = None, rng: Optional[RandomSource] = None) -> list[BattleEvent]:
        """
        Initialize a battle between two validated combatants

        Args:
            player: Player-controlled combatant
            bot: AI-controlled combatant
            seed: Seed for the random source (time-based when omitted)
            rng: A ready random source; takes precedence over ``seed``
        """
        random_source = rng if rng is not None else RandomSource.from_seed(seed)

        self.battle_state = BattleState(
            player=player,
            bot=bot,
            player_hp=player.max_hp,
            player_max_hp=player.max_hp,
            bot_hp=bot.max_hp,
            bot_max_hp=bot.max_hp,
            player_pp=PPTable.from_moves(player.moves),
            bot_pp=PPTable.from_moves(bot.moves),
            rng=random_source,
        )
        # pydantic keeps the instance it was given, so the calculators share the state's stream
        self.damage_calculator = DamageCalculator(self.battle_state.rng)
        self.opponent_ai = OpponentAI(self.battle_state.rng)

        speed_tie = player.speed == bot.speed
        self.battle_state.first_attacker = determine_first_attacker(player, bot, self.battle_state.rng)
        self._set_status(BattleStatus.PLAYER_TURN)

        logger.info("Battle initialized: %s (%d HP) vs %s (%d HP), %s moves first", player.name, player.max_hp, bot.name, bot.max_hp, self.battle_state.first_attacker.value)
        return [self._emit(BattleEventKind.BATTLE_START, narration.battle_start_message(self.battle_state.first_attacker, speed_tie))]

    # =================================================================
    # COMMANDS
    # =================================================================

    def select_move(self, move_id: int) -> list[BattleEvent]:
        """
        Player selects a move by id and the whole turn is resolved

        Invalid calls (wrong status, a turn already in flight, an unknown or
        exhausted move) are ignored and return no events.
        """
        if not self.is_accepting_input():
            logger.debug("Ignoring move %s: a turn is in flight or the battle is over", move_id)
            return []

        events = self.begin_turn(move_id)
        while self.battle_state.resolving:
            events.extend(self.advance())
        return events

    def begin_turn(self, move_id: int) -> list[BattleEvent]:
        """
        Lock in both moves and the attack order for this turn

        This is the equivalent of the selection phase: the player's PP is spent,
        the opponent picks and spends its PP, and the attack queue is filled.
        No damage is dealt until ``advance`` is called.
        """
        if not self.is_accepting_input():
            logger.debug("Ignoring move %s: status=%s resolving=%s", move_id, self.battle_state.status.value, self.battle_state.resolving)
            return []

        events: list[BattleEvent] = []

        if self.needs_struggle():
            move = STRUGGLE
            events.append(self._emit(BattleEventKind.NO_MOVES_LEFT, narration.no_moves_left_message(self.battle_state.player.name), side=BattleSide.PLAYER))
        else:
            move = self.battle_state.player.get_move(move_id)
            if move is None:
                logger.debug("Ignoring unknown move id %s", move_id)
                return []
            if self.battle_state.player_pp.get(move.id) <= 0:
                logger.debug("Ignoring %s: no PP left", move.name)
                return []
            self.battle_state.player_pp.consume(move.id)

        return events + self._start_turn(move)

    def advance(self) -> list[BattleEvent]:
        """
        Resolve the next step of the turn in flight

        Applies one queued attack, or completes the turn once the queue is
        empty. When no turn is in flight and the player has run out of PP, a
        Struggle turn is started on the player's behalf instead.
        """
        if not self.battle_state.resolving:
            if self.battle_state.status == BattleStatus.PLAYER_TURN and self.needs_struggle():
                return self.begin_turn(STRUGGLE.id)
            return []

        if not self.battle_state.pending_attackers:
            return self._end_turn()

        attacker_side = self.battle_state.pending_attackers.pop(0)
        return self._execute_attack(attacker_side)

    # =================================================================
    # QUERIES
    # =================================================================

    def is_accepting_input(self) -> bool:
        return self.battle_state.status == BattleStatus.PLAYER_TURN and not self.battle_state.resolving

    def needs_struggle(self) -> bool:
        """True when the player has no remaining PP on any move"""
        return not self.battle_state.player_pp.has_any()

    def is_battle_over(self) -> bool:
        return self.battle_state.status.is_terminal

    def get_winner(self) -> Optional[BattleSide]:
        """
        Get the winning side if battle is over

        Returns:
            BattleSide.PLAYER or BattleSide.BOT, None while the battle continues or on a draw
        """
        if self.battle_state.status == BattleStatus.PLAYER_WON:
            return BattleSide.PLAYER
        if self.battle_state.status == BattleStatus.BOT_WON:
            return BattleSide.BOT
        return None

    def get_snapshot(self) -> BattleSnapshot:
        state = self.battle_state
        return BattleSnapshot(
            turn=state.turn_count,
            status=state.status,
            playerHP=state.player_hp,
            playerMaxHP=state.player_max_hp,
            botHP=state.bot_hp,
            botMaxHP=state.bot_max_hp,
            playerHPPercent=narration.hp_percent(state.player_hp, state.player_max_hp),
            botHPPercent=narration.hp_percent(state.bot_hp, state.bot_max_hp),
            playerMovesPP=state.player_pp.as_dict(),
            botMovesPP=state.bot_pp.as_dict(),
            lastPlayerMove=state.last_player_move,
            lastBotMove=state.last_bot_move,
            lastAttackResult=state.last_attack,
            firstAttacker=state.first_attacker,
            animating=state.resolving,
            hasMovesWithPP=state.player_pp.has_any(),
            isBattleOver=state.status.is_terminal,
            currentMessage=state.current_message,
        )

    # =================================================================
    # HELPER METHODS
    # =================================================================

    def _start_turn(self, player_move: BattleMove) -> list[BattleEvent]:
        state = self.battle_state
        state.resolving = True
        state.player_selected_move = player_move
        state.last_attack = None

        events = [self._emit(BattleEventKind.MOVE_SELECTED, narration.move_selected_message(player_move.name), side=BattleSide.PLAYER, move=player_move)]
        self._set_status(BattleStatus.BOT_TURN)

        # Opponent's PP is spent at selection time, before it is known whether it gets to act
        bot_move = self.opponent_ai.select_move(state.bot, state.player, state.bot_pp)
        if not bot_move.is_struggle:
            state.bot_pp.consume(bot_move.id)
        state.bot_selected_move = bot_move

        state.pending_attackers = self._determine_turn_order()
        state.is_first_turn_resolved = True

        logger.info("Turn %d: %s chose %s, %s chose %s, order %s", state.turn_count, state.player.name, player_move.name, state.bot.name, bot_move.name, [side.value for side in state.pending_attackers])
        return events

    def _determine_turn_order(self) -> list[BattleSide]:
        """Speed order on the very first turn only; afterwards the player always moves first"""
        if not self.battle_state.is_first_turn_resolved and self.battle_state.first_attacker == BattleSide.BOT:
            return [BattleSide.BOT, BattleSide.PLAYER]
        return [BattleSide.PLAYER, BattleSide.BOT]

    def _execute_attack(self, attacker_side: BattleSide) -> list[BattleEvent]:
        state = self.battle_state
        defender_side = attacker_side.opponent
        attacker = state.get_combatant(attacker_side)
        defender = state.get_combatant(defender_side)
        move = state.get_selected_move(attacker_side)

        # Speed only called out when it decided this turn's order
        faster = state.turn_count == FIRST_TURN and state.first_attacker == attacker_side and len(state.pending_attackers) == 1

        result = self.damage_calculator.calculate(move, attacker, defender)
        outcome = AttackOutcome(moveId=move.id, effectiveness=result.effectiveness, critical=result.isCritical, damage=result.damage, attacker=attacker_side)
        state.last_attack = outcome
        if attacker_side == BattleSide.PLAYER:
            state.last_player_move = move
        else:
            state.last_bot_move = move

        remaining_hp = self._apply_damage(defender_side, result.damage)
        logger.info("%s used %s on %s for %d damage (%d HP left)", attacker.name, move.name, defender.name, result.damage, remaining_hp)

        uses_line = narration.uses_move_message(attacker.name, move.name, attacker_side, faster=faster)
        state.messages.append(uses_line)
        if remaining_hp > 0:
            result_line = narration.attack_result_message(attacker.name, result.damage, result.effectiveness, result.isCritical)
            return [self._emit(BattleEventKind.ATTACK, result_line, side=attacker_side, move=move, outcome=outcome, headline=uses_line)]

        attack_event = self._emit(BattleEventKind.ATTACK, "", side=attacker_side, move=move, outcome=outcome, headline=uses_line)
        return [attack_event] + self._resolve_faint(defender_side)

    def _apply_damage(self, side: BattleSide, damage: int) -> int:
        """Subtract damage from one side, floored at 0"""
        state = self.battle_state
        if side == BattleSide.PLAYER:
            state.player_hp = max(state.player_hp - damage, 0)
            return state.player_hp
        state.bot_hp = max(state.bot_hp - damage, 0)
        return state.bot_hp

    def _resolve_faint(self, fainted_side: BattleSide) -> list[BattleEvent]:
        state = self.battle_state
        winner = fainted_side.opponent
        fainted = state.get_combatant(fainted_side)

        # The fainted side never gets its attack
        state.pending_attackers = []
        state.resolving = False
        self._set_status(BattleStatus.PLAYER_WON if winner == BattleSide.PLAYER else BattleStatus.BOT_WON)

        logger.info("%s fainted, %s wins after %d turn(s)", fainted.name, winner.value, state.turn_count)
        return [
            self._emit(BattleEventKind.FAINT, narration.faint_message(fainted.name), side=fainted_side),
            self._emit(BattleEventKind.BATTLE_END, narration.victory_message(winner), side=winner),
        ]

    def _end_turn(self) -> list[BattleEvent]:
        state = self.battle_state
        state.turn_count += 1
        state.player_selected_move = None
        state.bot_selected_move = None
        state.last_attack = None
        state.first_attacker = BattleSide.PLAYER
        state.resolving = False
        self._set_status(BattleStatus.PLAYER_TURN)

        return [self._emit(BattleEventKind.TURN_COMPLETE, narration.next_turn_message(state.turn_count))]

    def _set_status(self, status: BattleStatus) -> None:
        current = self.battle_state.status
        if status not in STATUS_TRANSITIONS[current]:
            raise InvalidTransitionError(current.value, status.value)
        self.battle_state.status = status

    def _emit(
        self,
        kind: BattleEventKind,
        message: str,
        side: Optional[BattleSide] = None,
        move: Optional[BattleMove] = None,
        outcome: Optional[AttackOutcome] = None,
        headline: Optional[str] = None,
    ) -> BattleEvent:
        """Record narration on the message log and package it with a snapshot"""
        if message:
            self.battle_state.messages.append(message)
        text = " ".join(part for part in (headline, message) if part)
        return BattleEvent(kind=kind, message=text, snapshot=self.get_snapshot(), side=side, move=move, outcome=outcome)
