"""Fish species catalogue and the timer-driven fish spawner."""

from __future__ import annotations

import csv
import os
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from reefbeat.timer import Timer

Vec2 = tuple[float, float]

FOLLOWER_ENTRY = 2


class FishType(IntEnum):
    FISH1 = 1
    FISH2 = 2
    FISH3 = 3


@dataclass(frozen=True)
class FishDex:
    """One species: how it looks, how fast it swims, how likely and how valuable."""

    type: FishType
    scale: Vec2
    velocity: Vec2
    file_path: str
    possibility: float
    money: int


@dataclass(frozen=True)
class Formation:
    """Follower offsets behind a school leader, with random jitter ranges."""

    offsets: tuple[Vec2, ...]
    random_offset_min_x: float
    random_offset_max_x: float
    random_offset_min_y: float
    random_offset_max_y: float


FORMATIONS: tuple[Formation, ...] = (
    Formation(((-30, -30), (-30, 30), (-60, -60), (-60, 60)), 70.0, 100.0, 80.0, 110.0),
    Formation(((-30, -30), (-30, 30)), 70.0, 80.0, 70.0, 80.0),
    Formation(((-30, -30), (-30, 30), (-60, 0)), 70.0, 80.0, 70.0, 80.0),
)


@dataclass(frozen=True)
class SpawnPlan:
    """A fish to spawn, and the offsets of followers relative to it.

    Followers use the catalogue entry ``follower_entry`` for their look.
    """

    entry_index: int
    fish_type: FishType
    followers: tuple[Vec2, ...] = ()
    follower_entry: int = FOLLOWER_ENTRY


def read_fish_csv(path: str | os.PathLike[str]) -> list[FishDex]:
    """Read the species table; the first row is a header.

    Columns: type, scale, velocity, sprite path, possibility, money.
    Raises OSError when the file cannot be read and ValueError on bad rows.
    """
    entries: list[FishDex] = []
    with open(path, newline="", encoding="utf-8") as handle:
        rows = csv.reader(handle)
        next(rows, None)
        for row in rows:
            if not any(cell.strip() for cell in row):
                continue
            if len(row) < 6:
                raise ValueError(f"fish row has {len(row)} columns, expected 6")
            kind, scale, velocity, file_path, possibility, money = row[:6]
            scale_size = float(scale)
            entries.append(
                FishDex(
                    type=FishType(int(kind)),
                    scale=(scale_size, scale_size),
                    velocity=(float(velocity), 0.0),
                    file_path=file_path,
                    possibility=float(possibility),
                    money=int(money),
                )
            )
    return entries


class FishBook:
    """The species catalogue, in file order."""

    def __init__(self, entries: Iterable[FishDex]) -> None:
        self.entries = list(entries)

    @property
    def weights(self) -> list[float]:
        return [entry.possibility for entry in self.entries]

    @property
    def moneys(self) -> list[int]:
        return [entry.money for entry in self.entries]

    def money_for(self, fish_type: int) -> int:
        """Price of a fish type, counting types from 1."""
        position = int(fish_type) - 1
        if not 0 <= position < len(self.entries):
            raise IndexError(f"no fish of type {fish_type}")
        return self.entries[position].money

    def pick_index(self, rng: random.Random) -> int:
        """Entry index drawn with probability proportional to its possibility."""
        if not self.entries:
            raise ValueError("the fish book is empty")
        return rng.choices(range(len(self.entries)), weights=self.weights)[0]


class FishSpawner:
    """Decides when to spawn a fish and whether it brings a school along."""

    def __init__(
        self,
        book: FishBook,
        rng: random.Random | None = None,
        interval: float = 2.0,
        limit: int = 80,
    ) -> None:
        self.book = book
        self.limit = limit
        self._rng = rng if rng is not None else random.Random()
        self._timer = Timer(interval)

    def update(self, dt: float, fish_count: int) -> SpawnPlan | None:
        """Advance the spawn timer; return a plan when a fish should appear."""
        self._timer.update(dt)
        if self._timer.remaining() != 0 or fish_count >= self.limit:
            return None

        index = self.book.pick_index(self._rng)
        fish_type = self.book.entries[index].type
        self._timer.reset()

        followers: tuple[Vec2, ...] = ()
        if fish_type == FishType.FISH3:
            formation = FORMATIONS[self._rng.randrange(len(FORMATIONS))]
            followers = tuple(self._follower(formation, offset) for offset in formation.offsets)
        return SpawnPlan(index, fish_type, followers)

    def _follower(self, formation: Formation, offset: Vec2) -> Vec2:
        span_x = int(formation.random_offset_max_x - formation.random_offset_min_x)
        span_y = int(formation.random_offset_max_y - formation.random_offset_min_y)
        jitter_x = self._rng.randrange(span_x) + formation.random_offset_min_x
        jitter_y = self._rng.randrange(span_y) + formation.random_offset_min_y
        return (offset[0] + jitter_x, offset[1] + jitter_y)