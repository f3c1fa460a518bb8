"""
Tests for the console renderer.
"""

import random

import pytest

from skirmish.adventure import AdventureRun
from skirmish.combat import ActionReport, CombatantSnapshot, EncounterSummary, ExperienceReport
from skirmish.core.constants import AdventureOutcome, CombatantKind, CombatState, HitOutcome
from skirmish.core.dice import DiceRoller
from skirmish.entities import Adventure, Encounter
from skirmish.ui import ConsoleRenderer


@pytest.fixture
def printed(mocker):
    """Collects everything the renderer prints."""
    mock_cprint = mocker.patch("skirmish.ui.renderer.cprint")
    mocker.patch("skirmish.ui.renderer.crule")

    def _lines():
        return [str(call.args[0]) for call in mock_cprint.call_args_list]

    return _lines


def _report(**overrides):
    values = dict(
        slot=0,
        actor="Jinx",
        actor_kind=CombatantKind.CHARACTER,
        attack_name="Sword slash",
        hit_roll=5,
        outcome=HitOutcome.HIT,
        damage=5,
        damage_type="physical",
        targets=["Goblin"],
        downed=[],
    )
    values.update(overrides)
    return ActionReport(**values)


def test_character_hit(printed):
    ConsoleRenderer().on_action(_report())
    lines = printed()
    assert lines[0].endswith("attacks Goblin with Sword slash.")
    assert "Hits and deals 5 physical damage." in lines[1]


def test_critical_kill(printed):
    ConsoleRenderer().on_action(_report(hit_roll=10, outcome=HitOutcome.CRITICAL, damage=10, downed=["Goblin"]))
    lines = printed()
    assert "Critical hit" in lines[1]
    assert "deals 10 physical damage." in lines[1]
    assert "Goblin dies." in lines[2]


def test_monster_fail(printed):
    report = _report(
        actor="Goblin",
        actor_kind=CombatantKind.MONSTER,
        attack_name=None,
        hit_roll=1,
        outcome=HitOutcome.FAIL,
        damage=0,
        damage_type="Slashing",
        targets=["Jinx"],
    )
    ConsoleRenderer().on_action(report)
    lines = printed()
    assert lines[0].endswith("attacks Jinx.")
    assert "Fails and deals 0 Slashing damage." in lines[1]


def test_member_falls_unconscious(printed):
    report = _report(actor="Lich", actor_kind=CombatantKind.MONSTER, attack_name=None, targets=["Jinx", "Vex"], downed=["Vex"])
    ConsoleRenderer().on_action(report)
    assert "Vex falls unconscious." in printed()[-1]


def test_short_rest_with_level_up(printed):
    report = ExperienceReport(
        name="Jinx",
        xp_gained=50,
        xp_total=120,
        level=2,
        leveled_up=True,
        healing=4,
        current_hp=22,
        max_hp=22,
    )
    ConsoleRenderer().on_short_rest(report)
    text = "\n".join(printed())
    assert "gains 50 XP (total 120)." in text
    assert "Level up! Jinx is now level 2." in text
    assert "Jinx recovers 4 HP (22/22)." in text


def test_encounter_end(printed):
    renderer = ConsoleRenderer()
    renderer.on_encounter_end(EncounterSummary(index=1, state=CombatState.MONSTERS_DEFEATED, rounds=2, xp_awarded=50))
    renderer.on_encounter_end(EncounterSummary(index=2, state=CombatState.PARTY_DEFEATED, rounds=3))
    lines = printed()
    assert "Each character gains 50 XP." in lines[0]
    assert "defeated in encounter 2" in lines[1]


def test_status_line_shows_hit_points():
    snapshot = CombatantSnapshot(name="Jinx", kind=CombatantKind.CHARACTER, current_hp=4, max_hp=11)
    line = ConsoleRenderer.status_line(snapshot)
    assert "Jinx" in line
    assert "4/11" in line


def test_renderer_follows_a_whole_run(party, make_monster, mocker):
    mock_cprint = mocker.patch("skirmish.ui.renderer.cprint")
    mock_crule = mocker.patch("skirmish.ui.renderer.crule")
    rat = make_monster("Rat", hit_points=1, experience=50)
    adventure = Adventure(name="Cellar", encounters=[Encounter(monsters=[rat])])

    result = AdventureRun(adventure, party, DiceRoller(random.Random(9)), ConsoleRenderer()).run()

    assert mock_cprint.called
    last_rule = str(mock_crule.call_args.args[0])
    if result.outcome is AdventureOutcome.VICTORY:
        assert "Victory!" in last_rule
    else:
        assert "Defeat!" in last_rule
