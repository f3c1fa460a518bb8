"""
Combat events module for the simulator.

Immutable snapshots of the simulation state, handed to observers after each
step. Observers only ever see copies, so rendering cannot feed back into the
simulation.
"""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from skirmish.core.constants import (
    AdventureOutcome,
    CombatantKind,
    CombatState,
    HitOutcome,
)
from skirmish.entities.combatant import Combatant


class CombatantSnapshot(BaseModel):
    """Read-only view of a combatant."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the combatant")
    kind: CombatantKind = Field(description="Character or monster")
    current_hp: int = Field(description="Current hit points")
    max_hp: int = Field(description="Maximum hit points")
    initiative: int = Field(default=0, description="Rolled initiative")
    turn_slot: int = Field(default=-1, description="Position in the turn order")
    damage_type: str | None = Field(default=None, description="Damage type of monsters")

    @property
    def is_conscious(self) -> bool:
        return self.current_hp > 0

    @classmethod
    def of(cls, combatant: Combatant) -> "CombatantSnapshot":
        """Takes a snapshot of a character or monster."""
        return cls(
            name=combatant.name,
            kind=combatant.kind,
            current_hp=combatant.current_hp,
            max_hp=combatant.hp_max,
            initiative=combatant.initiative,
            turn_slot=combatant.turn_slot,
            damage_type=getattr(combatant, "damage_type", None)
            if combatant.kind is CombatantKind.MONSTER
            else None,
        )


class ActionReport(BaseModel):
    """Outcome of one combatant's action."""

    model_config = ConfigDict(frozen=True)

    slot: int = Field(description="Turn slot that was resolved")
    actor: str = Field(description="Name of the acting combatant")
    actor_kind: CombatantKind = Field(description="Side of the acting combatant")
    attack_name: str | None = Field(default=None, description="Name of the attack used")
    hit_roll: int = Field(description="Value of the hit die")
    outcome: HitOutcome = Field(description="Fail, hit or critical")
    damage: int = Field(description="Damage dealt to each target")
    damage_type: str = Field(description="Damage type, for display")
    targets: list[str] = Field(default_factory=list, description="Names of the targets")
    downed: list[str] = Field(
        default_factory=list,
        description="Targets that died or fell unconscious from this action",
    )


class ExperienceReport(BaseModel):
    """Short-rest outcome of one party member."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the character")
    xp_gained: int = Field(description="Experience awarded for the encounter")
    xp_total: int = Field(description="Experience after the award")
    level: int = Field(description="Level after the award")
    leveled_up: bool = Field(description="Whether the award raised the level")
    healing: int = Field(default=0, description="Hit points recovered during the short rest")
    current_hp: int = Field(description="Hit points after the short rest")
    max_hp: int = Field(description="Maximum hit points after the short rest")


class EncounterSummary(BaseModel):
    """Result of one encounter."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(description="1-based position of the encounter in the adventure")
    state: CombatState = Field(description="Terminal combat state")
    rounds: int = Field(description="Number of rounds fought")
    xp_awarded: int = Field(default=0, description="Experience awarded to each member")


class CombatObserver(Protocol):
    """Receives snapshots of an adventure run. Every hook is optional in spirit."""

    def on_encounter_start(self, index: int, monsters: list[tuple[str, int]]) -> None: ...

    def on_preparation(self, party: list[CombatantSnapshot]) -> None: ...

    def on_turn_order(self, order: list[CombatantSnapshot]) -> None: ...

    def on_round_start(self, round_number: int, party: list[CombatantSnapshot]) -> None: ...

    def on_action(self, report: ActionReport) -> None: ...

    def on_round_end(self, round_number: int) -> None: ...

    def on_encounter_end(self, summary: EncounterSummary) -> None: ...

    def on_short_rest(self, report: ExperienceReport) -> None: ...

    def on_adventure_end(self, adventure: str, outcome: AdventureOutcome) -> None: ...


class NullObserver:
    """Observer that ignores everything, used for headless runs."""

    def on_encounter_start(self, index: int, monsters: list[tuple[str, int]]) -> None:
        pass

    def on_preparation(self, party: list[CombatantSnapshot]) -> None:
        pass

    def on_turn_order(self, order: list[CombatantSnapshot]) -> None:
        pass

    def on_round_start(self, round_number: int, party: list[CombatantSnapshot]) -> None:
        pass

    def on_action(self, report: ActionReport) -> None:
        pass

    def on_round_end(self, round_number: int) -> None:
        pass

    def on_encounter_end(self, summary: EncounterSummary) -> None:
        pass

    def on_short_rest(self, report: ExperienceReport) -> None:
        pass

    def on_adventure_end(self, adventure: str, outcome: AdventureOutcome) -> None:
        pass
