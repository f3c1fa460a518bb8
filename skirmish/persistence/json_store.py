"""
JSON record stores for the simulator.

Each store keeps one kind of record (characters, monsters, adventures) as a
JSON array in a single file, keyed by the record name.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any, Generic, TypeVar

from catchery import log_error, log_warning
from pydantic import BaseModel, ValidationError

from skirmish.core.constants import ADVENTURES_FILE, CHARACTERS_FILE, MONSTERS_FILE
from skirmish.core.errors import PersistenceError
from skirmish.core.logging import log_debug
from skirmish.entities import Adventure, Character, Monster

RecordT = TypeVar("RecordT", bound=BaseModel)


class JsonStore(Generic[RecordT]):
    """
    A JSON array of records in a single file.

    Subclasses set :attr:`model` to the record type. When
    :attr:`create_missing` is True a missing file is created empty on first
    load, otherwise a missing file is an error.
    """

    model: type[RecordT]
    description: str = "records"
    create_missing: bool = True

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    # === Reading ===

    def load_all(self) -> list[RecordT]:
        """
        Loads every record of the file.

        Returns:
            list[RecordT]: The records, in file order.

        Raises:
            PersistenceError: If the file cannot be read or holds invalid records.

        """
        try:
            if not self.path.exists():
                if not self.create_missing:
                    raise FileNotFoundError(f"File not found: {self.path}")
                log_debug(f"Creating empty {self.description} file", {"path": self.path})
                self._write([])
                return []
            if not self.path.is_file():
                raise ValueError(f"Not a file: {self.path}")
            text = self.path.read_text(encoding="utf-8")
            if not text.strip():
                return []
            data = json.loads(text)
            if not isinstance(data, list):
                raise ValueError(f"Expected list in {self.path}, got {type(data).__name__}")
            return [self.model.model_validate(entry) for entry in data]
        except (OSError, json.JSONDecodeError, ValidationError, ValueError) as e:
            log_error(
                f"Failed to load {self.description} from {self.path}",
                {"path": str(self.path), "error": str(e)},
            )
            raise PersistenceError(f"Cannot load {self.description} from {self.path}: {e}", e) from e

    def names(self) -> list[str]:
        """Returns the names of the stored records."""
        return [self._name_of(record) for record in self.load_all()]

    def get_by_name(self, name: str) -> RecordT | None:
        """
        Finds a record by its exact name.

        Returns:
            RecordT | None: The record, or None if no record has that name.

        """
        for record in self.load_all():
            if self._name_of(record) == name:
                return record
        log_warning(
            f"No {self.description} named '{name}'.",
            {"path": str(self.path), "name": name},
        )
        return None

    # === Writing ===

    def save(self, record: RecordT) -> None:
        """
        Appends a new record.

        Raises:
            PersistenceError: If a record with the same name exists or the
                file cannot be written.

        """
        records = self.load_all()
        name = self._name_of(record)
        if any(self._name_of(r) == name for r in records):
            raise PersistenceError(f"A record named '{name}' already exists in {self.path}")
        records.append(record)
        self._write_records(records)

    def update(self, record: RecordT) -> None:
        """
        Replaces the record holding the same name.

        Raises:
            PersistenceError: If no record has that name or the file cannot be written.

        """
        records = self.load_all()
        name = self._name_of(record)
        for index, existing in enumerate(records):
            if self._name_of(existing) == name:
                records[index] = record
                self._write_records(records)
                return
        log_error(
            f"Cannot update missing {self.description} '{name}'.",
            {"path": str(self.path), "name": name},
        )
        raise PersistenceError(f"No record named '{name}' in {self.path}")

    def delete(self, name: str) -> bool:
        """
        Removes the named record.

        Returns:
            bool: True if a record was removed.

        """
        records = self.load_all()
        kept = [r for r in records if self._name_of(r) != name]
        if len(kept) == len(records):
            return False
        self._write_records(kept)
        return True

    # === Internals ===

    @staticmethod
    def _name_of(record: Any) -> str:
        return record.name

    def _write_records(self, records: list[RecordT]) -> None:
        self._write([r.model_dump(mode="json", by_alias=True) for r in records])

    def _write(self, data: list[dict[str, Any]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            log_error(
                f"Failed to write {self.description} to {self.path}",
                {"path": str(self.path), "error": str(e)},
            )
            raise PersistenceError(f"Cannot write {self.description} to {self.path}: {e}", e) from e


class CharacterStore(JsonStore[Character]):
    """Characters of every player."""

    model = Character
    description = "characters"

    def find_by_player(self, player: str | None = None) -> list[Character]:
        """
        Lists the characters of a player.

        Args:
            player (str | None): Case-insensitive part of the player name.
                None, an empty string or a newline lists every character.

        Returns:
            list[Character]: The matching characters.

        """
        characters = self.load_all()
        if player is None or not player.strip():
            return characters
        needle = player.strip().lower()
        return [c for c in characters if needle in c.player.lower()]


class MonsterStore(JsonStore[Monster]):
    """The monster catalog. The file must exist."""

    model = Monster
    description = "monsters"
    create_missing = False


class AdventureStore(JsonStore[Adventure]):
    """Authored adventures."""

    model = Adventure
    description = "adventures"

    def name_exists(self, name: str) -> bool:
        return name in self.names()


def open_stores(data_dir: Path | str) -> tuple[CharacterStore, MonsterStore, AdventureStore]:
    """
    Opens the three stores of a data directory.

    Args:
        data_dir (Path | str): Directory holding the JSON files.

    Returns:
        tuple[CharacterStore, MonsterStore, AdventureStore]: The stores.

    """
    root = Path(data_dir)
    return (
        CharacterStore(root / CHARACTERS_FILE),
        MonsterStore(root / MONSTERS_FILE),
        AdventureStore(root / ADVENTURES_FILE),
    )


def install_sample_data(data_dir: Path | str) -> list[Path]:
    """
    Copies the sample records shipped with the package into a data directory.

    Files already present are left alone, so a player's records are never
    overwritten.

    Args:
        data_dir (Path | str): Directory that will hold the JSON files.

    Returns:
        list[Path]: The files that were created.

    Raises:
        PersistenceError: If a file cannot be written.

    """
    root = Path(data_dir)
    samples = resources.files("skirmish") / "data"
    created: list[Path] = []
    for file_name in (CHARACTERS_FILE, MONSTERS_FILE, ADVENTURES_FILE):
        target = root / file_name
        if target.exists():
            continue
        try:
            root.mkdir(parents=True, exist_ok=True)
            target.write_text((samples / file_name).read_text(encoding="utf-8"), encoding="utf-8")
        except OSError as e:
            log_error(
                f"Failed to install sample {file_name}",
                {"path": str(target), "error": str(e)},
            )
            raise PersistenceError(f"Cannot write {target}: {e}", e) from e
        log_debug("Installed sample data", {"path": target})
        created.append(target)
    return created
