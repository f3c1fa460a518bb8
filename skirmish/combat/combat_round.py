"""
Combat round module for the simulator.

Resolves an encounter slot by slot: characters attack the weakest monster,
normal monsters strike a random conscious party member, bosses strike every
conscious party member. Dead monsters leave the encounter after each slot.
"""

from skirmish.classes import get_class_actions
from skirmish.core.constants import (
    HIT_DIE_SIDES,
    CombatantKind,
    CombatState,
    HitOutcome,
)
from skirmish.core.dice import DiceRoller
from skirmish.core.errors import PreconditionError
from skirmish.core.logging import log_debug
from skirmish.entities.character import Character
from skirmish.entities.encounter import Encounter
from skirmish.entities.monster import Monster

from .events import ActionReport, CombatantSnapshot, CombatObserver, NullObserver

# Rejection sampling attempts per party member before falling back to a
# direct draw among the conscious members.
TARGET_ATTEMPTS_PER_MEMBER = 10


def apply_hit_die(damage: int, hit_roll: int) -> int:
    """
    Applies the hit die to a damage roll.

    Args:
        damage (int): The unmodified damage.
        hit_roll (int): The value of the hit die.

    Returns:
        int: 0 on a failed hit, double on a critical, unchanged otherwise.

    """
    outcome = HitOutcome.from_roll(hit_roll)
    if outcome is HitOutcome.FAIL:
        return 0
    if outcome is HitOutcome.CRITICAL:
        return damage * 2
    return damage


class CombatRound:
    """
    Runs the combat of one encounter to its end.

    The turn slots must already be assigned (see
    :func:`skirmish.combat.turn_order.schedule_turns`). The number of slots per
    round is fixed when the combat starts; slots of dead monsters are skipped.
    """

    def __init__(
        self,
        party: list[Character],
        encounter: Encounter,
        roller: DiceRoller,
        observer: CombatObserver | None = None,
    ) -> None:
        """
        Initialize the combat.

        Args:
            party (list[Character]): The party members.
            encounter (Encounter): The encounter, its monster list is the live list.
            roller (DiceRoller): The random source.
            observer (CombatObserver | None): Receives the action reports.

        Raises:
            PreconditionError: If the party or the encounter is empty.

        """
        if not party:
            raise PreconditionError("Cannot start a combat without party members")
        if encounter.is_empty():
            raise PreconditionError("Cannot start a combat without monsters")
        self.party = party
        self.encounter = encounter
        self.roller = roller
        self.observer: CombatObserver = observer or NullObserver()
        self.total_combatants: int = len(party) + len(encounter.monsters)
        self.round_number: int = 0

    @property
    def state(self) -> CombatState:
        """Current state, derived from the live combatants."""
        if not any(character.is_conscious() for character in self.party):
            return CombatState.PARTY_DEFEATED
        if not self.encounter.monsters:
            return CombatState.MONSTERS_DEFEATED
        return CombatState.ACTIVE

    def run(self) -> CombatState:
        """
        Runs rounds until one side is defeated.

        Returns:
            CombatState: The terminal state.

        """
        while not self.state.is_over:
            self.run_round()
        log_debug(
            "Combat over",
            {"state": self.state, "rounds": self.round_number},
        )
        return self.state

    def run_round(self) -> CombatState:
        """
        Runs one pass over every turn slot, stopping as soon as a side is defeated.

        Returns:
            CombatState: The state after the pass.

        """
        self.round_number += 1
        self.observer.on_round_start(
            self.round_number, [CombatantSnapshot.of(c) for c in self.party]
        )
        for slot in range(self.total_combatants):
            if self.state.is_over:
                break
            self.resolve_slot(slot)
        self.observer.on_round_end(self.round_number)
        return self.state

    def resolve_slot(self, slot: int) -> list[ActionReport]:
        """
        Resolves every conscious combatant holding the given turn slot.

        Args:
            slot (int): The turn slot.

        Returns:
            list[ActionReport]: One report per action taken.

        """
        reports: list[ActionReport] = []

        character = next(
            (c for c in self.party if c.turn_slot == slot and c.is_conscious()),
            None,
        )
        if character is not None:
            report = self._character_attack(character, slot)
            if report is not None:
                reports.append(report)

        for monster in [m for m in self.encounter.monsters if m.turn_slot == slot]:
            if not monster.is_conscious() or self.state.is_over:
                continue
            reports.append(self._monster_attack(monster, slot))

        for report in reports:
            self.observer.on_action(report)

        self._end_slot()
        return reports

    def _character_attack(self, character: Character, slot: int) -> ActionReport | None:
        """Attacks the monster with the lowest current hit points."""
        actions = get_class_actions(character.class_name)
        hit_roll = self.roller.roll(HIT_DIE_SIDES)
        raw_damage = actions.roll_attack(character, self.roller)
        if raw_damage is None:
            log_debug(
                f"{character.name} has no attack",
                {"class": character.class_name, "slot": slot},
            )
            return None
        damage = max(0, apply_hit_die(raw_damage, hit_roll))

        # min() keeps the first of equal candidates.
        target = min(self.encounter.monsters, key=lambda m: m.current_hp)
        target.adjust_hp(-damage)
        target.targeted = True

        log_debug(
            f"{character.name} attacks {target.name}",
            {"hit": hit_roll, "damage": damage, "remaining": target.current_hp},
        )
        return ActionReport(
            slot=slot,
            actor=character.name,
            actor_kind=CombatantKind.CHARACTER,
            attack_name=actions.attack_name,
            hit_roll=hit_roll,
            outcome=HitOutcome.from_roll(hit_roll),
            damage=damage,
            damage_type=actions.damage_type,
            targets=[target.name],
            downed=[] if target.is_conscious() else [target.name],
        )

    def _monster_attack(self, monster: Monster, slot: int) -> ActionReport:
        """Attacks one random conscious party member, or all of them for a boss."""
        hit_roll = self.roller.roll(HIT_DIE_SIDES)
        damage = max(0, apply_hit_die(monster.roll_damage(self.roller), hit_roll))

        if monster.is_boss:
            targets = [c for c in self.party if c.is_conscious()]
        else:
            targets = [self._pick_conscious_member()]

        for target in targets:
            target.adjust_hp(-damage)
            target.targeted = True

        log_debug(
            f"{monster.name} attacks {', '.join(t.name for t in targets)}",
            {"hit": hit_roll, "damage": damage, "boss": monster.is_boss},
        )
        return ActionReport(
            slot=slot,
            actor=monster.name,
            actor_kind=CombatantKind.MONSTER,
            hit_roll=hit_roll,
            outcome=HitOutcome.from_roll(hit_roll),
            damage=damage,
            damage_type=monster.damage_type,
            targets=[t.name for t in targets],
            downed=[t.name for t in targets if not t.is_conscious()],
        )

    def _pick_conscious_member(self) -> Character:
        """
        Picks a party member uniformly among the conscious ones.

        Raises:
            PreconditionError: If nobody in the party is conscious.

        """
        conscious = [c for c in self.party if c.is_conscious()]
        if not conscious:
            raise PreconditionError("No conscious party member to target")
        for _ in range(TARGET_ATTEMPTS_PER_MEMBER * len(self.party)):
            candidate = self.party[self.roller.pick(len(self.party))]
            if candidate.is_conscious():
                return candidate
        return conscious[self.roller.pick(len(conscious))]

    def _end_slot(self) -> None:
        """Clears the targeted flags and drops the dead monsters."""
        for character in self.party:
            character.targeted = False
        for monster in self.encounter.monsters:
            monster.targeted = False
        survivors = [m for m in self.encounter.monsters if m.current_hp > 0]
        if len(survivors) != len(self.encounter.monsters):
            self.encounter.monsters = survivors
