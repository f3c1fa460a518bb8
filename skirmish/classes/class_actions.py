"""
Class actions module for the simulator.

Maps a character's class tag to the bundle of behaviours the adventure
lifecycle and the combat engine need: the preparation action, the initiative
rule, the attack roll, the short-rest healing roll and the reversal of the
preparation action. Unregistered tags resolve to the no-op bundle.
"""

from catchery import log_warning

from skirmish.core.dice import DiceRoller
from skirmish.entities.character import Character


class ClassActions:
    """
    Behaviour bundle of a character class.

    The base class is the no-op bundle: it does not prepare, roll initiative,
    attack or heal, and has nothing to revert. Subclasses override the hooks
    their class supports.
    """

    name: str = "None"
    attack_name: str = "nothing"
    damage_type: str = "none"

    def prepare(self, character: Character) -> None:
        """Preparation stage action, run once per encounter before initiative."""

    def roll_initiative(self, character: Character, roller: DiceRoller) -> int | None:
        """
        Rolls the initiative of the character.

        Returns:
            int | None: The initiative, or None when the class has no initiative rule.

        """
        return None

    def roll_attack(self, character: Character, roller: DiceRoller) -> int | None:
        """
        Rolls the unmodified damage of the character's attack.

        Returns:
            int | None: The damage, or None when the class cannot attack.

        """
        return None

    def roll_healing(self, character: Character, roller: DiceRoller) -> int | None:
        """
        Rolls the short-rest healing of the character.

        Returns:
            int | None: The healing, or None when the class cannot heal.

        """
        return None

    def revert(self, character: Character) -> None:
        """Undoes the preparation stage action after the short rest."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


NO_OP_ACTIONS = ClassActions()

_REGISTRY: dict[str, ClassActions] = {}


def register_class_actions(tag: str, actions: ClassActions) -> None:
    """
    Registers the actions of a class.

    Args:
        tag (str): The class tag as stored on the character.
        actions (ClassActions): The behaviour bundle.

    """
    if not tag:
        raise ValueError("Class tag must be a non-empty string")
    if tag in _REGISTRY:
        log_warning(
            f"Replacing the actions registered for class '{tag}'",
            {"tag": tag, "previous": repr(_REGISTRY[tag]), "new": repr(actions)},
        )
    _REGISTRY[tag] = actions


def unregister_class_actions(tag: str) -> None:
    """Removes a registered class, unknown tags are ignored."""
    _REGISTRY.pop(tag, None)


def get_class_actions(tag: str) -> ClassActions:
    """
    Returns the actions registered for a class tag.

    Args:
        tag (str): The class tag.

    Returns:
        ClassActions: The registered bundle, or the no-op bundle.

    """
    return _REGISTRY.get(tag, NO_OP_ACTIONS)


def registered_classes() -> list[str]:
    """Returns the registered class tags."""
    return list(_REGISTRY)
