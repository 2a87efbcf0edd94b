"""Boss fight configuration and the movement rules a boss follows."""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

Vec2 = tuple[float, float]

_BOSS_FILES = {
    0: "assets/jsons/boss/boss_e.json",
    1: "assets/jsons/boss/boss_y.json",
}


class BossName(IntEnum):
    """Bosses that have a configuration file."""

    E = 0
    Y = 1


class BossType(Enum):
    """How a boss behaves during its entries."""

    CHASING_PLAYER = 0
    SHOOTING = 1
    MULTI_INSTANCE = 2
    MOVING_TO_LOCATION = 3


@dataclass(frozen=True)
class EntryData:
    """One step of an attack pattern: what to do, where, and after how many beats."""

    attack_type: float
    position: Vec2
    delay: float


@dataclass
class BossConfig:
    boss_name: str = ""
    index: int = 0
    is_boss_fight: bool = False
    bpm: int = 0
    mp3: str = ""
    move_position: tuple[int, int] = (0, 0)
    pattern: list[list[EntryData]] = field(default_factory=list)
    total_entry: list[int] = field(default_factory=list)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_int(value: Any, name: str) -> int:
    if not _is_int(value):
        raise ValueError(f"{name} must be an integer")
    return value


def _as_float(value: Any, name: str) -> float:
    if not _is_number(value):
        raise ValueError(f"{name} must be a number")
    return float(value)


def _read_pattern(raw: list[Any]) -> list[list[EntryData]]:
    pattern: list[list[EntryData]] = []
    for group in raw:
        if not (isinstance(group, dict) and isinstance(group.get("entry"), list)):
            continue
        entries = [
            EntryData(
                attack_type=_as_float(points[0], "entry attack type"),
                position=(
                    _as_float(points[1], "entry x"),
                    _as_float(points[2], "entry y"),
                ),
                delay=_as_float(points[3], "entry delay"),
            )
            for points in group["entry"]
            if isinstance(points, list) and len(points) == 4
        ]
        pattern.append(entries)
    return pattern


def load_boss_config(path: str | os.PathLike[str]) -> BossConfig:
    """Read a boss configuration file; absent or mistyped fields keep defaults.

    Raises OSError when the file cannot be read and ValueError when it is
    not a JSON object or holds values of the wrong kind where numbers are
    required.
    """
    with open(path, "rb") as handle:
        raw = handle.read()
    try:
        doc = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(f"JSON parse error in {os.fspath(path)}: {exc}") from exc
    if not isinstance(doc, dict):
        raise ValueError("boss configuration must be a JSON object")

    config = BossConfig()
    if isinstance(doc.get("Boss name"), str):
        config.boss_name = doc["Boss name"]
    if _is_int(doc.get("Index")):
        config.index = doc["Index"]
    if isinstance(doc.get("Isbossfight"), bool):
        config.is_boss_fight = doc["Isbossfight"]
    if _is_int(doc.get("BPM")):
        config.bpm = doc["BPM"]
    if isinstance(doc.get("Mp3"), str):
        config.mp3 = doc["Mp3"]

    position = doc.get("Position")
    if isinstance(position, list) and len(position) == 2:
        config.move_position = (
            _as_int(position[0], "Position[0]"),
            _as_int(position[1], "Position[1]"),
        )

    total = doc.get("Total entry")
    if isinstance(total, list):
        config.total_entry = [entry for entry in total if _is_int(entry)]

    pattern = doc.get("Parttern")
    if isinstance(pattern, list):
        config.pattern = _read_pattern(pattern)
    return config


def boss_file(name: BossName) -> str:
    """Path of the configuration file for a boss."""
    try:
        return _BOSS_FILES[int(name)]
    except KeyError:
        raise ValueError(f"no configuration file for boss {name!r}") from None


def entry_state_for_bar(
    bar_count: int, total_entry: list[int], state_count: int
) -> int | None:
    """Index of the entry state to switch to at a given bar.

    Returns None when the state should stay as it is. Raises IndexError
    once the bar is past the end of the fight, when the boss is done.
    """
    if bar_count > len(total_entry):
        raise IndexError(f"bar {bar_count} is past the last entry")
    if 0 <= bar_count < len(total_entry):
        state = total_entry[bar_count] - 1
        if 0 <= state < state_count:
            return state
    return None


def chase_step(boss_position: Vec2, player_position: Vec2, speed: float) -> Vec2:
    """Next target when chasing: a quarter of ``speed`` toward the player."""
    step = speed / 4
    dx = player_position[0] - boss_position[0]
    dy = player_position[1] - boss_position[1]
    distance = math.hypot(dx, dy)
    if distance > step:
        return (
            boss_position[0] + dx / distance * step,
            boss_position[1] + dy / distance * step,
        )
    return (float(player_position[0]), float(player_position[1]))


def lerp(start: Vec2, end: Vec2, t: float) -> Vec2:
    """Linear interpolation between two points."""
    return (
        start[0] + t * (end[0] - start[0]),
        start[1] + t * (end[1] - start[1]),
    )