"""
Tests for the adventure lifecycle.
"""

import random

import pytest

from skirmish.adventure import AdventureRun
from skirmish.combat import NullObserver
from skirmish.core.constants import AdventureOutcome, ChallengeTier, CombatState
from skirmish.core.dice import DiceRoller
from skirmish.core.errors import PreconditionError
from skirmish.entities import Adventure, Encounter


@pytest.fixture
def one_rat_adventure(make_monster):
    rat = make_monster("Rat", hit_points=1, experience=50, damage_dice="d4")
    return Adventure(name="Cellar", encounters=[Encounter(monsters=[rat])])


def test_party_clears_single_weak_monster(party, one_rat_adventure, scripted):
    # Initiative 10, 8, 6 for the party and 1 for the rat, then Aria hits
    # for 2 and three healing rolls for the short rest.
    roller = scripted(rolls=[10, 8, 6, 1, 5, 2, 3, 3, 3])

    result = AdventureRun(one_rat_adventure, party, roller).run()

    assert result.outcome is AdventureOutcome.VICTORY
    assert result.is_victory
    assert result.encounters_cleared == 1
    assert result.experience == {"Aria": 50, "Bram": 50, "Cole": 50}
    assert [m.xp for m in result.party] == [50, 50, 50]
    assert not roller.rolls


def test_run_does_not_touch_inputs(party, one_rat_adventure):
    result = AdventureRun(one_rat_adventure, party, DiceRoller(random.Random(1))).run()
    assert result.party[0] is not party[0]
    assert all(c.xp == 0 and c.current_hp == 0 for c in party)
    assert one_rat_adventure.encounters[0].monsters[0].current_hp == 0


def test_victory_discards_combat_fields(party, one_rat_adventure):
    result = AdventureRun(one_rat_adventure, party, DiceRoller(random.Random(2))).run()
    assert result.is_victory
    for member in result.party:
        assert member.current_hp == 0
        assert member.turn_slot == -1


def test_experience_is_counted_from_the_initial_monsters(party, make_monster):
    weak = make_monster("Rat", hit_points=1, experience=20, damage_dice="d1")
    adventure = Adventure(
        name="Rat Nest",
        encounters=[Encounter(monsters=[weak.spawn(), weak.spawn(), weak.spawn()])],
    )
    result = AdventureRun(adventure, party, DiceRoller(random.Random(5))).run()
    assert result.is_victory
    assert result.experience["Aria"] == 60


def test_defeat_aborts_the_adventure(party, make_monster, mocker):
    titan = make_monster(
        "Titan",
        hit_points=500,
        experience=1000,
        damage_dice="10d10",
        challenge=ChallengeTier.BOSS,
    )
    rat = make_monster("Rat")
    adventure = Adventure(
        name="Doom",
        encounters=[Encounter(monsters=[titan]), Encounter(monsters=[rat])],
    )
    observer = mocker.Mock(spec=NullObserver)

    result = AdventureRun(adventure, party, DiceRoller(random.Random(3)), observer).run()

    assert result.outcome is AdventureOutcome.DEFEAT
    assert result.encounters_cleared == 0
    assert result.experience == {"Aria": 0, "Bram": 0, "Cole": 0}
    assert all(m.xp == 0 for m in result.party)
    observer.on_encounter_start.assert_called_once()
    observer.on_short_rest.assert_not_called()
    observer.on_adventure_end.assert_called_once_with("Doom", AdventureOutcome.DEFEAT)
    summary = observer.on_encounter_end.call_args.args[0]
    assert summary.state is CombatState.PARTY_DEFEATED
    assert summary.xp_awarded == 0


def test_short_rest(make_character, one_rat_adventure, scripted):
    leveling = make_character("Aria", xp=90)
    downed = make_character("Bram")
    hurt = make_character("Cole")
    run = AdventureRun(one_rat_adventure, [leveling, downed, hurt], scripted(rolls=[5, 3]))
    for member in run.party:
        member.initialize_hp()
        member.spirit = 1
    run.party[0].current_hp = 0
    run.party[1].current_hp = 0
    run.party[2].current_hp = 4

    reports = run.short_rest(20)

    # Levelling up restores the unconscious member before the rest.
    assert reports[0].leveled_up
    assert reports[0].level == 2
    assert (reports[0].current_hp, reports[0].max_hp) == (20, 20)
    assert reports[0].healing == 0
    # Unconscious members do not heal.
    assert not reports[1].leveled_up
    assert reports[1].current_hp == 0
    assert reports[1].healing == 0
    # Healing is d8 + mind.
    assert reports[2].healing == 3
    assert reports[2].current_hp == 7
    # Every member reverts the preparation.
    assert all(member.spirit == -1 for member in run.party)
    assert all(report.xp_gained == 20 for report in reports)


def test_healing_is_clamped(make_character, one_rat_adventure, scripted):
    member = make_character("Aria", mind=3)
    run = AdventureRun(one_rat_adventure, [member], scripted(rolls=[8]))
    run.party[0].initialize_hp()
    run.party[0].current_hp = 9
    [report] = run.short_rest(0)
    assert report.healing == 1
    assert report.current_hp == 10


def test_party_is_required(one_rat_adventure):
    with pytest.raises(PreconditionError):
        AdventureRun(one_rat_adventure, [])


def test_observer_sees_every_stage(party, one_rat_adventure, scripted, mocker):
    observer = mocker.Mock(spec=NullObserver)
    roller = scripted(rolls=[10, 8, 6, 1, 5, 2, 3, 3, 3])

    AdventureRun(one_rat_adventure, party, roller, observer).run()

    observer.on_encounter_start.assert_called_once_with(1, [("Rat", 1)])
    [prepared] = observer.on_preparation.call_args.args
    assert len(prepared) == 3
    [order] = observer.on_turn_order.call_args.args
    assert [s.name for s in order] == ["Aria", "Bram", "Cole", "Rat"]
    assert [s.initiative for s in order] == [11, 9, 7, 1]
    assert observer.on_short_rest.call_count == 3
    observer.on_adventure_end.assert_called_once_with("Cellar", AdventureOutcome.VICTORY)


@pytest.mark.parametrize("seed", range(10))
def test_seeded_runs_finish(party, make_monster, seed):
    goblin = make_monster("Goblin", hit_points=8, damage_dice="d4")
    boss = make_monster("Ogre", hit_points=30, damage_dice="d8", challenge=ChallengeTier.BOSS)
    adventure = Adventure(
        name="Gauntlet",
        encounters=[
            Encounter(monsters=[goblin.spawn(), goblin.spawn()]),
            Encounter(monsters=[boss.spawn(), goblin.spawn()]),
        ],
    )
    result = AdventureRun(adventure, party, DiceRoller(random.Random(seed))).run()
    if result.is_victory:
        assert result.encounters_cleared == 2
    else:
        assert result.encounters_cleared < 2


def test_result_keeps_selection_order(party, one_rat_adventure, scripted):
    # Initiative 3, 10, 6 for the party and 1 for the rat, so Bram acts first
    # and kills the rat, then three healing rolls for the short rest.
    roller = scripted(rolls=[2, 9, 5, 1, 5, 2, 3, 3, 3])
    run = AdventureRun(one_rat_adventure, party, roller)

    result = run.run()

    assert result.is_victory
    assert [m.name for m in run.lineup] == ["Bram", "Cole", "Aria"]
    assert [m.name for m in result.party] == ["Aria", "Bram", "Cole"]
    assert not roller.rolls
