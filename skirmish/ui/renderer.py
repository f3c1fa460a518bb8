"""
Console renderer for the simulator.

Prints the snapshots of an adventure run with rich markup. The renderer only
reads the snapshots it receives and never touches the simulation.
"""

from skirmish.combat.events import (
    ActionReport,
    CombatantSnapshot,
    EncounterSummary,
    ExperienceReport,
)
from skirmish.core.constants import (
    AdventureOutcome,
    CombatantKind,
    CombatState,
    HitOutcome,
)
from skirmish.core.utils import cprint, crule, make_bar


class ConsoleRenderer:
    """Observer printing the progress of an adventure to the console."""

    def __init__(self, show_rounds: bool = True) -> None:
        """
        Initialize the renderer.

        Args:
            show_rounds (bool): Print the party status at the start of each round.

        """
        self.show_rounds = show_rounds

    # === Encounter ===

    def on_encounter_start(self, index: int, monsters: list[tuple[str, int]]) -> None:
        crule(f"[bold]Encounter {index}[/]", style="red")
        for name, quantity in monsters:
            cprint(f"    {quantity} x {CombatantKind.MONSTER.colorize(name)}")

    def on_preparation(self, party: list[CombatantSnapshot]) -> None:
        cprint("[bold yellow]The party prepares for battle.[/]")

    def on_turn_order(self, order: list[CombatantSnapshot]) -> None:
        cprint("[bold yellow]Turn Order:[/]")
        for combatant in order:
            cprint(f"    🎲 {combatant.initiative:3}  {self.status_line(combatant)}")

    def on_round_start(self, round_number: int, party: list[CombatantSnapshot]) -> None:
        crule(f"Round {round_number}", style="dim white")
        if self.show_rounds:
            for member in party:
                cprint(f"    {self.status_line(member)}")

    def on_action(self, report: ActionReport) -> None:
        """Prints the attack line, its outcome and who went down."""
        kind = report.actor_kind
        targets = ", ".join(report.targets)
        line = f"{kind.colorize(report.actor)} attacks {targets}"
        if report.attack_name:
            line += f" with {report.attack_name}"
        cprint(line + ".")
        cprint(f"    {self.outcome_line(report)}")
        # Characters kill monsters, monsters knock characters out.
        verb = "dies" if kind is CombatantKind.CHARACTER else "falls unconscious"
        for name in report.downed:
            cprint(f"    [bold red]{name} {verb}.[/]")

    def on_round_end(self, round_number: int) -> None:
        pass

    def on_encounter_end(self, summary: EncounterSummary) -> None:
        if summary.state is CombatState.MONSTERS_DEFEATED:
            cprint(
                f"[bold green]Encounter {summary.index} won in {summary.rounds} "
                f"round(s)![/] Each character gains {summary.xp_awarded} XP."
            )
        else:
            cprint(f"[bold red]The party has been defeated in encounter {summary.index}.[/]")

    def on_short_rest(self, report: ExperienceReport) -> None:
        """Prints the experience, level-up and healing of one character."""
        name = CombatantKind.CHARACTER.colorize(report.name)
        cprint(f"{name} gains {report.xp_gained} XP (total {report.xp_total}).")
        if report.leveled_up:
            cprint(f"    [bold magenta]Level up! {report.name} is now level {report.level}.[/]")
        if report.current_hp <= 0:
            cprint(f"    {report.name} is unconscious and cannot rest.")
        else:
            cprint(
                f"    {report.name} recovers {report.healing} HP "
                f"({report.current_hp}/{report.max_hp})."
            )

    def on_adventure_end(self, adventure: str, outcome: AdventureOutcome) -> None:
        if outcome is AdventureOutcome.VICTORY:
            crule(f"[bold green]Victory! '{adventure}' is complete.[/]", style="green")
        else:
            crule(f"[bold red]Defeat! The party fell during '{adventure}'.[/]", style="red")

    # === Formatting ===

    @staticmethod
    def status_line(combatant: CombatantSnapshot) -> str:
        """Returns the name and hit point bar of a combatant."""
        kind = combatant.kind
        hp_color = "green" if combatant.is_conscious else "red"
        bar = make_bar(combatant.current_hp, combatant.max_hp, color=hp_color)
        return (
            f"{kind.emoji} {kind.colorize(f'{combatant.name:<16}')} "
            f"{bar} {combatant.current_hp:>3}/{combatant.max_hp:<3}"
        )

    @staticmethod
    def outcome_line(report: ActionReport) -> str:
        """Returns the hit outcome and damage of an action."""
        if report.outcome is HitOutcome.FAIL:
            return f"[dim]Fails and deals 0 {report.damage_type} damage.[/]"
        if report.outcome is HitOutcome.CRITICAL:
            return f"[bold yellow]Critical hit[/] and deals {report.damage} {report.damage_type} damage."
        return f"Hits and deals {report.damage} {report.damage_type} damage."
