"""
Adventure service for the simulator.

Ties the record stores to the adventure lifecycle: lists what a player can
pick, authors new adventures, runs them and writes the earned experience
back.
"""

from skirmish.combat import CombatObserver
from skirmish.core.dice import DiceRoller
from skirmish.core.errors import PersistenceError, PreconditionError
from skirmish.core.logging import log_info
from skirmish.entities import Adventure, Character, Encounter, Monster
from skirmish.persistence import AdventureStore, CharacterStore, MonsterStore

from .adventure_manager import AdventureResult, AdventureRun
from .authoring import build_adventure, select_party


class AdventureService:
    """Entry point of the simulator for user interfaces."""

    def __init__(
        self,
        characters: CharacterStore,
        monsters: MonsterStore,
        adventures: AdventureStore,
    ) -> None:
        self.characters = characters
        self.monsters = monsters
        self.adventures = adventures

    def available_characters(self, player: str | None = None) -> list[Character]:
        """Lists the characters of a player, or every character."""
        return self.characters.find_by_player(player)

    def available_adventures(self) -> list[Adventure]:
        return self.adventures.load_all()

    def monster_catalog(self) -> list[Monster]:
        return self.monsters.load_all()

    def create_adventure(self, name: str, encounters: list[Encounter]) -> Adventure:
        """
        Authors and stores a new adventure.

        Raises:
            PreconditionError: If the adventure is not valid or the name is taken.
            PersistenceError: If the adventure cannot be stored.

        """
        if name and self.adventures.name_exists(name.strip()):
            raise PreconditionError(f"An adventure named '{name.strip()}' already exists")
        adventure = build_adventure(name, encounters)
        self.adventures.save(adventure)
        log_info(f"Created adventure '{adventure.name}'", {"encounters": len(encounters)})
        return adventure

    def start_adventure(
        self,
        adventure_name: str,
        party_names: list[str],
        roller: DiceRoller | None = None,
        observer: CombatObserver | None = None,
    ) -> AdventureResult:
        """
        Runs an adventure with the picked party.

        Args:
            adventure_name (str): Name of a stored adventure.
            party_names (list[str]): Three to five distinct character names.
            roller (DiceRoller | None): The random source.
            observer (CombatObserver | None): Receives the snapshots of the run.

        Returns:
            AdventureResult: The outcome, nothing is written back yet.

        Raises:
            PreconditionError: If the adventure or a character is unknown, or
                the party size is out of bounds.

        """
        adventure = self.adventures.get_by_name(adventure_name)
        if adventure is None:
            raise PreconditionError(f"Unknown adventure: {adventure_name}")
        party = select_party(self.characters.load_all(), party_names)
        return AdventureRun(adventure, party, roller, observer).run()

    def save_progress(self, result: AdventureResult) -> list[Character]:
        """
        Writes the experience of a victorious party back to the store.

        Only the experience is written; every other field keeps its stored
        value. A defeat writes nothing.

        Returns:
            list[Character]: The updated records.

        Raises:
            PersistenceError: If a party member is no longer stored or the
                store cannot be written.

        """
        if not result.is_victory:
            return []
        updated: list[Character] = []
        for member in result.party:
            record = self.characters.get_by_name(member.name)
            if record is None:
                raise PersistenceError(f"Character '{member.name}' is no longer stored")
            record.xp = member.xp
            self.characters.update(record)
            updated.append(record)
        log_info(
            f"Saved progress of '{result.adventure}'",
            {"characters": ", ".join(c.name for c in updated)},
        )
        return updated
