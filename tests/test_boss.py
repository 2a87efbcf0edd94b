import json
import math

import pytest

from reefbeat.boss import (
    BossConfig,
    BossName,
    BossType,
    EntryData,
    boss_file,
    chase_step,
    entry_state_for_bar,
    lerp,
    load_boss_config,
)


def _write(tmp_path, document):
    path = tmp_path / "boss.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_load_full_config(tmp_path):
    path = _write(
        tmp_path,
        {
            "Boss name": "E",
            "Index": 3,
            "Isbossfight": True,
            "BPM": 128,
            "Mp3": "assets/audio/boss.mp3",
            "Position": [10, -20],
            "Total entry": [1, 2, "x", 3],
            "Parttern": [
                {"entry": [[1, 100.5, 200, 0], [3, -50, 25, 2], [1, 2]]},
                {"other": []},
                {"entry": []},
            ],
        },
    )
    config = load_boss_config(path)
    assert config.boss_name == "E"
    assert config.index == 3
    assert config.is_boss_fight is True
    assert config.bpm == 128
    assert config.mp3 == "assets/audio/boss.mp3"
    assert config.move_position == (10, -20)
    assert config.total_entry == [1, 2, 3]
    assert config.pattern == [
        [
            EntryData(1.0, (100.5, 200.0), 0.0),
            EntryData(3.0, (-50.0, 25.0), 2.0),
        ],
        [],
    ]


def test_missing_fields_keep_defaults(tmp_path):
    path = _write(tmp_path, {"BPM": "fast", "Position": [1, 2, 3]})
    assert load_boss_config(path) == BossConfig()


def test_parse_error_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_boss_config(path)


def test_non_object_raises(tmp_path):
    path = _write(tmp_path, [1, 2])
    with pytest.raises(ValueError):
        load_boss_config(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_boss_config(tmp_path / "absent.json")


def test_bad_position_value_raises(tmp_path):
    path = _write(tmp_path, {"Position": [1, "two"]})
    with pytest.raises(ValueError):
        load_boss_config(path)


def test_boss_files():
    assert boss_file(BossName.E) == "assets/jsons/boss/boss_e.json"
    assert boss_file(BossName.Y) == "assets/jsons/boss/boss_y.json"


def test_boss_file_unknown():
    with pytest.raises(ValueError):
        boss_file(7)


def test_boss_types_round_trip_by_value():
    members = list(BossType)
    assert len(members) == 4
    assert [BossType(t.value) for t in members] == members


@pytest.mark.parametrize("bar, expected", [(0, 0), (1, 1), (2, 3), (4, None)])
def test_entry_state_for_bar(bar, expected):
    assert entry_state_for_bar(bar, [1, 2, 4, 5], 4) == expected


def test_entry_state_past_end_raises():
    with pytest.raises(IndexError):
        entry_state_for_bar(5, [1, 2, 3, 4], 4)


def test_entry_state_zero_entry_ignored():
    assert entry_state_for_bar(0, [0], 4) is None


def test_chase_step_moves_quarter_speed_toward_player():
    boss, player = (0.0, 0.0), (300.0, 400.0)
    result = chase_step(boss, player, 400.0)
    assert math.isclose(math.dist(boss, result), 100.0)
    assert math.isclose(
        math.dist(boss, result) + math.dist(result, player), math.dist(boss, player)
    )


def test_chase_step_reaches_close_player():
    assert chase_step((0.0, 0.0), (30.0, 40.0), 400.0) == (30.0, 40.0)


def test_lerp_endpoints_and_midpoint():
    start, end = (2.0, -4.0), (10.0, 20.0)
    assert lerp(start, end, 0.0) == start
    assert lerp(start, end, 1.0) == end
    assert lerp((0.0, 0.0), (10.0, 20.0), 0.5) == (5.0, 10.0)