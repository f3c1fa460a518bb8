"""
Tests for initiative rolls and the merged turn order.
"""

from skirmish.combat import merge_turn_order, roll_initiative, schedule_turns
from skirmish.entities import Encounter


def test_monster_initiative_adds_base(party, make_monster, scripted):
    goblin = make_monster(initiative=2)
    roll_initiative([], [goblin], scripted(rolls=[5]))
    assert goblin.initiative == 7


def test_character_initiative_uses_class_rule(make_character, scripted):
    character = make_character(spirit=1)
    roll_initiative([character], [], scripted(rolls=[6]))
    assert character.initiative == 7


def test_unknown_class_keeps_initiative(make_character, make_monster, scripted):
    bard = make_character(class_name="Bard")
    bard.initiative = 4
    goblin = make_monster()
    roller = scripted(rolls=[6])
    roll_initiative([bard], [goblin], roller)
    assert bard.initiative == 4
    # The only scripted roll went to the monster.
    assert goblin.initiative == 6
    assert not roller.rolls


def test_merge_prefers_monster_on_tie(make_character, make_monster, scripted):
    aria = make_character("Aria", spirit=0)
    bram = make_character("Bram", spirit=1)
    cole = make_character("Cole", spirit=2)
    goblin = make_monster(initiative=2)
    party = [aria, bram, cole]
    encounter = Encounter(monsters=[goblin])

    order = schedule_turns(party, encounter, scripted(rolls=[5, 5, 1, 3]))

    # Aria 5, Bram 6, Cole 3, Goblin 5.
    assert [c.name for c in order] == ["Bram", "Goblin", "Aria", "Cole"]
    assert [c.turn_slot for c in order] == [0, 1, 2, 3]
    assert [c.name for c in party] == ["Bram", "Aria", "Cole"]


def test_merge_keeps_relative_order_of_ties(make_character, make_monster):
    first = make_character("First")
    second = make_character("Second")
    first.initiative = second.initiative = 8
    wolf = make_monster("Wolf")
    rat = make_monster("Rat")
    wolf.initiative = rat.initiative = 3

    order = merge_turn_order([first, second], [wolf, rat])

    assert [c.name for c in order] == ["First", "Second", "Wolf", "Rat"]


def test_merge_drains_remaining_monsters(make_character, make_monster):
    hero = make_character("Hero")
    hero.initiative = 1
    monsters = [make_monster(f"Goblin {i}") for i in range(3)]
    for i, monster in enumerate(monsters):
        monster.initiative = 10 - i

    order = merge_turn_order([hero], monsters)

    assert [c.name for c in order] == ["Goblin 0", "Goblin 1", "Goblin 2", "Hero"]
    assert hero.turn_slot == 3


def test_slots_are_unique(party, make_monster, scripted):
    encounter = Encounter(monsters=[make_monster().spawn() for _ in range(4)])
    order = schedule_turns(party, encounter, scripted(seed=3))
    slots = sorted(c.turn_slot for c in order)
    assert slots == list(range(len(party) + 4))
