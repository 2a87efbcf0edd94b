"""Kinds of objects that live in the game world."""

from __future__ import annotations

from enum import Enum


class GameObjectType(Enum):
    SHIP = 0
    ROCK = 1
    MOVING_ROCK = 2
    ROCK_BOUNDARY = 3
    ROCK_POINT = 4
    FISH = 5
    NET = 6
    BACKGROUND_FISH = 7
    PARTICLE = 8
    BOSS = 9
    DIALOG = 10
    COUNT = 11
    SHOP = 12
    MOUSE = 13
    UI = 14
    PLAYER = 15
    ICON = 16
    MONSTER = 17
    MODULE = 18
    BOSS_BULLET = 19
    BOX = 20


_PIXEL_SHADER_TYPES: frozenset[GameObjectType] = frozenset()


def is_pixel_shader_applicable(object_type: GameObjectType) -> bool:
    """Whether objects of this kind are drawn with the pixelate shader."""
    return object_type in _PIXEL_SHADER_TYPES