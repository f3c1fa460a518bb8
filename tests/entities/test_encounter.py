"""
Tests for monsters, encounters and adventures.
"""

import pytest

from skirmish.core.constants import ChallengeTier
from skirmish.entities import Adventure, Combatant, Encounter, Monster


def test_monster_from_json_record():
    monster = Monster.model_validate(
        {
            "name": "Lich",
            "challenge": "Boss",
            "experience": 400,
            "hitPoints": 70,
            "initiative": 3,
            "damageDice": "d10",
            "damageType": "Necrotic",
        }
    )
    assert monster.is_boss
    assert monster.hit_points == 70
    assert str(monster.damage) == "d10"
    data = monster.model_dump(mode="json", by_alias=True)
    assert data["hitPoints"] == 70
    assert data["challenge"] == "Boss"
    assert "current_hp" not in data


def test_monster_rejects_bad_dice(make_monster):
    with pytest.raises(ValueError):
        make_monster(damage_dice="banana")


def test_monster_rejects_zero_hit_points(make_monster):
    with pytest.raises(ValueError):
        make_monster(hit_points=0)


def test_spawned_monsters_are_independent(make_monster):
    goblin = make_monster()
    first, second = goblin.spawn(), goblin.spawn()
    first.initialize_hp()
    first.adjust_hp(-3)
    assert first.current_hp == 5
    assert second.current_hp == 0
    assert goblin.current_hp == 0


def test_monster_damage(make_monster, scripted):
    monster = make_monster(damage_dice="2d4")
    assert monster.roll_damage(scripted(rolls=[1, 4])) == 5


def test_monster_hp_clamps(make_monster):
    monster = make_monster(hit_points=8)
    monster.initialize_hp()
    assert monster.adjust_hp(-20) == -8
    assert not monster.is_conscious()
    assert isinstance(monster, Combatant)


def test_encounter_rejects_two_bosses(make_monster):
    boss = make_monster("Lich", challenge=ChallengeTier.BOSS)
    with pytest.raises(ValueError):
        Encounter(monsters=[boss.spawn(), boss.spawn()])


def test_encounter_summary(make_monster):
    goblin = make_monster("Goblin", experience=20)
    wolf = make_monster("Wolf", experience=25)
    encounter = Encounter(monsters=[goblin.spawn(), wolf.spawn(), goblin.spawn()])
    assert encounter.summarize() == [("Goblin", 2), ("Wolf", 1)]
    assert encounter.count_of("Goblin") == 2
    assert encounter.total_experience == 65
    assert encounter.boss_count == 0


def test_adventure_bounds(make_monster):
    encounter = Encounter(monsters=[make_monster()])
    with pytest.raises(ValueError):
        Adventure(name="Empty", encounters=[])
    with pytest.raises(ValueError):
        Adventure(name="Long", encounters=[encounter] * 5)
    with pytest.raises(ValueError):
        Adventure(name="Hollow", encounters=[encounter, Encounter()])
    with pytest.raises(ValueError):
        Adventure(name="", encounters=[encounter])


def test_adventure_spawn_is_independent(make_monster):
    adventure = Adventure(name="Caves", encounters=[Encounter(monsters=[make_monster()])])
    copy = adventure.spawn()
    copy.encounters[0].monsters.clear()
    assert len(adventure.encounters[0].monsters) == 1
