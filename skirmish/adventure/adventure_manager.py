"""
Adventure lifecycle module for the simulator.

Plays the encounters of an adventure in order: preparation, initiative,
combat, then experience and a short rest for the survivors. A party defeat
aborts the adventure.
"""

from pydantic import BaseModel, Field

from skirmish.classes import get_class_actions
from skirmish.combat import (
    CombatantSnapshot,
    CombatObserver,
    CombatRound,
    EncounterSummary,
    ExperienceReport,
    NullObserver,
    schedule_turns,
)
from skirmish.core.constants import AdventureOutcome, CombatState
from skirmish.core.dice import DiceRoller
from skirmish.core.errors import PreconditionError
from skirmish.core.logging import log_debug, log_info
from skirmish.entities import Adventure, Character, Encounter


class AdventureResult(BaseModel):
    """Outcome of a finished adventure run."""

    adventure: str = Field(description="Name of the adventure")
    outcome: AdventureOutcome = Field(description="Victory or defeat")
    encounters_cleared: int = Field(description="Number of encounters won")
    party: list[Character] = Field(description="The party members after the run")
    experience: dict[str, int] = Field(
        default_factory=dict,
        description="Experience gained during the run, per character name",
    )

    @property
    def is_victory(self) -> bool:
        return self.outcome is AdventureOutcome.VICTORY


class AdventureRun:
    """
    Runs a party through an adventure.

    The run works on private copies of the adventure and of the party, so the
    records the caller passed in are never modified. The final state of the
    party is part of the :class:`AdventureResult`, in the order the members
    were picked.
    """

    def __init__(
        self,
        adventure: Adventure,
        party: list[Character],
        roller: DiceRoller | None = None,
        observer: CombatObserver | None = None,
    ) -> None:
        """
        Initialize the run.

        Args:
            adventure (Adventure): The adventure to play.
            party (list[Character]): The party members.
            roller (DiceRoller | None): The random source, a fresh one if None.
            observer (CombatObserver | None): Receives the snapshots of the run.

        Raises:
            PreconditionError: If the party is empty.

        """
        if not party:
            raise PreconditionError("Cannot start an adventure without party members")
        self.adventure: Adventure = adventure.spawn()
        self.party: list[Character] = [member.model_copy(deep=True) for member in party]
        # Same members, reordered by initiative before every encounter.
        self.lineup: list[Character] = list(self.party)
        self.roller: DiceRoller = roller or DiceRoller()
        self.observer: CombatObserver = observer or NullObserver()
        self.experience: dict[str, int] = {member.name: 0 for member in self.party}

    def run(self) -> AdventureResult:
        """
        Plays every encounter until the party wins them all or is defeated.

        Returns:
            AdventureResult: The outcome of the run.

        """
        for encounter in self.adventure.encounters:
            for monster in encounter.monsters:
                monster.initialize_hp()
        for member in self.party:
            member.initialize_hp()

        log_info(
            f"Starting adventure '{self.adventure.name}'",
            {"party": ", ".join(m.name for m in self.party)},
        )

        for index, encounter in enumerate(self.adventure.encounters, start=1):
            state, xp = self.play_encounter(index, encounter)
            if state is CombatState.PARTY_DEFEATED:
                return self._finish(AdventureOutcome.DEFEAT, index - 1)
            self.short_rest(xp)

        for member in self.party:
            member.reset_combat_state()
        return self._finish(AdventureOutcome.VICTORY, len(self.adventure.encounters))

    def play_encounter(self, index: int, encounter: Encounter) -> tuple[CombatState, int]:
        """
        Fights one encounter to its end.

        Args:
            index (int): 1-based position of the encounter.
            encounter (Encounter): The encounter, emptied of its dead monsters.

        Returns:
            tuple[CombatState, int]: The terminal state and the experience
            earned by each party member (0 on defeat).

        """
        # Taken before the fight, the purge empties the monster list.
        total_xp = encounter.total_experience
        self.observer.on_encounter_start(index, encounter.summarize())

        for member in self.party:
            get_class_actions(member.class_name).prepare(member)
        self.observer.on_preparation([CombatantSnapshot.of(m) for m in self.party])

        order = schedule_turns(self.lineup, encounter, self.roller)
        self.observer.on_turn_order([CombatantSnapshot.of(c) for c in order])

        combat = CombatRound(self.lineup, encounter, self.roller, self.observer)
        state = combat.run()

        xp = total_xp if state is CombatState.MONSTERS_DEFEATED else 0
        self.observer.on_encounter_end(
            EncounterSummary(index=index, state=state, rounds=combat.round_number, xp_awarded=xp)
        )
        log_debug(
            f"Encounter {index} over",
            {"state": state, "rounds": combat.round_number, "xp": xp},
        )
        return state, xp

    def short_rest(self, xp: int) -> list[ExperienceReport]:
        """
        Awards the experience of a won encounter and lets the party recover.

        Each member receives the full amount. A member who levels up gets fresh
        hit points first; a conscious member then heals; finally the
        preparation action is reverted.

        Args:
            xp (int): Experience awarded to each member.

        Returns:
            list[ExperienceReport]: One report per member.

        """
        reports: list[ExperienceReport] = []
        for member in self.lineup:
            actions = get_class_actions(member.class_name)

            leveled_up = member.gain_experience(xp)
            self.experience[member.name] = self.experience.get(member.name, 0) + xp
            if leveled_up:
                member.initialize_hp()

            healing = 0
            if member.is_conscious():
                rolled = actions.roll_healing(member, self.roller)
                if rolled is not None:
                    healing = member.adjust_hp(max(0, rolled))

            actions.revert(member)

            report = ExperienceReport(
                name=member.name,
                xp_gained=xp,
                xp_total=member.xp,
                level=member.level,
                leveled_up=leveled_up,
                healing=healing,
                current_hp=member.current_hp,
                max_hp=member.max_hp,
            )
            self.observer.on_short_rest(report)
            reports.append(report)
        return reports

    def _finish(self, outcome: AdventureOutcome, cleared: int) -> AdventureResult:
        log_info(
            f"Adventure '{self.adventure.name}' ended",
            {"outcome": outcome, "cleared": cleared},
        )
        self.observer.on_adventure_end(self.adventure.name, outcome)
        return AdventureResult(
            adventure=self.adventure.name,
            outcome=outcome,
            encounters_cleared=cleared,
            party=self.party,
            experience=dict(self.experience),
        )
