"""
User interface module for the simulator.

Provides the console prompts a player uses to pick an adventure and a party
before a run.
"""

from typing import Any

from prompt_toolkit import ANSI, PromptSession
from prompt_toolkit.completion import WordCompleter
from rich.table import Table

from skirmish.core.constants import MAX_PARTY_SIZE, MIN_PARTY_SIZE
from skirmish.core.utils import ccapture
from skirmish.entities import Adventure, Character


class PlayerInterface:
    """
    Command-line interface for choosing what to play.

    Shows Rich tables and reads the answers through prompt_toolkit, with
    numeric shortcuts for the entries and 'q' to quit.
    """

    def __init__(self, session: PromptSession | None = None) -> None:
        """
        Initialize the PlayerInterface.

        Args:
            session (PromptSession | None): Session used for every prompt, one
                keeping the history is created on the first prompt if None.

        """
        self._session: PromptSession | None = session

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession(erase_when_done=True)
        return self._session

    def ask_player(self, known_players: list[str]) -> str:
        """
        Asks whose characters should be listed.

        Args:
            known_players (list[str]): Player names offered for completion.

        Returns:
            str: The typed name, empty to list every character.

        """
        completer = WordCompleter(sorted(set(known_players)), ignore_case=True)
        answer = self.session.prompt(
            "Player (empty for everyone) > ",
            completer=completer,
        )
        return answer.strip() if answer else ""

    def choose_adventure(self, adventures: list[Adventure]) -> Adventure | None:
        """Choose an adventure to play.

        Args:
            adventures (list[Adventure]): The stored adventures.

        Returns:
            Adventure | None: The selected adventure, or None to quit.

        """
        if not adventures:
            return None
        table = Table(title="Adventures", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Name", style="bold")
        table.add_column("Encounters", justify="right")
        table.add_column("Monsters", justify="right")
        table.add_column("Bosses", justify="right", style="magenta")
        for i, adventure in enumerate(adventures, 1):
            table.add_row(
                str(i),
                adventure.name,
                str(len(adventure.encounters)),
                str(sum(len(e.monsters) for e in adventure.encounters)),
                str(sum(e.boss_count for e in adventure.encounters)),
            )
        table.add_row()
        table.add_row("q", "Quit", "", "", "")
        prompt = "\n" + ccapture(table) + "\nAdventure > "
        while True:
            answer = self.session.prompt(ANSI(prompt))
            if not answer:
                continue
            index = self.get_digit_choice(answer) - 1
            if 0 <= index < len(adventures):
                return adventures[index]
            if answer.strip().lower() == "q":
                return None

    def choose_party(
        self,
        characters: list[Character],
        min_size: int = MIN_PARTY_SIZE,
        max_size: int = MAX_PARTY_SIZE,
    ) -> list[Character] | None:
        """Choose the party members by toggling entries.

        Args:
            characters (list[Character]): The characters available.
            min_size (int): Minimum party size.
            max_size (int): Maximum party size.

        Returns:
            list[Character] | None: The selected characters in selection
            order, or None to quit.

        """
        if len(characters) < min_size:
            return None
        selected: list[Character] = []
        while True:
            table = Table(title="Party", pad_edge=False)
            table.add_column("#", style="cyan", no_wrap=True)
            table.add_column("Name", style="bold")
            table.add_column("Player")
            table.add_column("Level", justify="right")
            table.add_column("B/M/S", justify="center")
            table.add_column("Selected", justify="center")
            for i, character in enumerate(characters, 1):
                table.add_row(
                    str(i),
                    character.name,
                    character.player,
                    str(character.level),
                    f"{character.body}/{character.mind}/{character.spirit}",
                    "[green]✓[/]" if character in selected else "",
                )
            table.add_row()
            table.add_row("a", "Confirm", f"{len(selected)}/{min_size}-{max_size}", "", "", "")
            table.add_row("q", "Quit", "", "", "", "")
            prompt = "\n" + ccapture(table) + "\nSelect > "
            answer = self.session.prompt(ANSI(prompt))
            if not answer:
                continue

            # Toggle the selection of the corresponding character.
            index = self.get_digit_choice(answer) - 1
            if 0 <= index < len(characters):
                character = characters[index]
                if character in selected:
                    selected.remove(character)
                elif len(selected) < max_size:
                    selected.append(character)
                continue

            if self.get_alpha_choice(answer) == 0 and min_size <= len(selected) <= max_size:
                return selected

            if answer.strip().lower() == "q":
                return None

    def confirm(self, question: str) -> bool:
        """Asks a yes/no question, anything but 'y' or 'yes' is a no."""
        answer = self.session.prompt(f"{question} [y/N] > ")
        return bool(answer) and answer.strip().lower() in ("y", "yes")

    @staticmethod
    def get_digit_choice(answer: str) -> int:
        """
        Convert a numeric string input to its integer value.

        Args:
            answer (str): User input string to parse.

        Returns:
            int: The integer value, or -1 if invalid input.

        """
        if isinstance(answer, str) and answer.strip().isdigit():
            return int(answer.strip())
        return -1

    @staticmethod
    def get_alpha_choice(answer: Any) -> int:
        """
        Convert a single alphabetic character to its index position.

        Maps 'a' or 'A' to 0, 'b' or 'B' to 1, etc. Case-insensitive.

        Args:
            answer (Any): User input to parse.

        Returns:
            int: The index position (0-25 for a-z), or -1 if invalid input.

        """
        if isinstance(answer, str) and len(answer) == 1 and answer.isalpha():
            return ord(answer.lower()) - ord("a")
        return -1
