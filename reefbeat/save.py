"""Save-game data, its JSON form, and a manager that keeps it on disk."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable

_log = logging.getLogger(__name__)

_TRANSIENT_EVENT = "Boss E Trigger"


@dataclass
class ModuleData:
    """Ownership and placement of one ship module."""

    bought: bool = False
    installed: bool = False
    position: float = 0.0


@dataclass
class SaveData:
    day: int = 0
    user_calibration: float = 0.0
    money: int = 0
    fish_collection: dict[int, int] = field(default_factory=dict)
    module1: ModuleData = field(default_factory=ModuleData)
    module2: ModuleData = field(default_factory=ModuleData)
    events_done: list[str] = field(default_factory=list)


def _module_to_json(module: ModuleData) -> dict[str, Any]:
    return {"buy": module.bought, "set": module.installed, "pos": module.position}


def serialize_save(data: SaveData) -> str:
    """Render save data as compact JSON."""
    document = {
        "day": data.day,
        "user_calibration": float(data.user_calibration),
        "inventory": {
            "money": data.money,
            "fishCollection": [
                {"type": fish_type, "count": count}
                for fish_type, count in sorted(data.fish_collection.items())
            ],
            "module1": _module_to_json(data.module1),
            "module2": _module_to_json(data.module2),
        },
        "events_done": [e for e in data.events_done if e != _TRANSIENT_EVENT],
    }
    return json.dumps(document, separators=(",", ":"))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_int(value: Any, name: str) -> int:
    if not _is_int(value):
        raise ValueError(f"{name} must be an integer")
    return value


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean")
    return value


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number")
    return float(value)


def _read_module(raw: dict[str, Any], name: str) -> ModuleData:
    module = ModuleData()
    if "buy" in raw:
        module.bought = _as_bool(raw["buy"], f"{name}.buy")
    if "set" in raw:
        module.installed = _as_bool(raw["set"], f"{name}.set")
    if "pos" in raw:
        module.position = _as_float(raw["pos"], f"{name}.pos")
    return module


def _read_fish(entries: Iterable[Any]) -> dict[int, int]:
    collection: dict[int, int] = {}
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError("fishCollection entries must be objects")
        if "type" in entry and "count" in entry:
            fish_type = _as_int(entry["type"], "fishCollection.type")
            collection[fish_type] = _as_int(entry["count"], "fishCollection.count")
    return collection


def deserialize_save(text: str) -> SaveData:
    """Parse save JSON; fields that are absent or of the wrong kind keep defaults.

    Raises ValueError when the text is not a JSON object or a field the
    format requires to be typed holds something else.
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid save data: {exc}") from exc
    if not isinstance(doc, dict):
        raise ValueError("save data must be a JSON object")

    data = SaveData()
    if _is_int(doc.get("day")):
        data.day = doc["day"]
    if isinstance(doc.get("user_calibration"), float):
        data.user_calibration = doc["user_calibration"]

    inventory = doc.get("inventory")
    if isinstance(inventory, dict):
        if "money" in inventory:
            data.money = _as_int(inventory["money"], "money")
        fish = inventory.get("fishCollection")
        if isinstance(fish, list):
            data.fish_collection = _read_fish(fish)
        if isinstance(inventory.get("module1"), dict):
            data.module1 = _read_module(inventory["module1"], "module1")
        if isinstance(inventory.get("module2"), dict):
            data.module2 = _read_module(inventory["module2"], "module2")

    events = doc.get("events_done")
    if isinstance(events, list):
        data.events_done = [e for e in events if isinstance(e, str)]
    return data


def load_text(path: str | os.PathLike[str]) -> str:
    """Read a whole file as UTF-8 text."""
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8")


def default_save_data() -> SaveData:
    """Save data for a fresh game."""
    return SaveData(day=1, money=0, events_done=[])


class SaveDataManager:
    """Holds the current save data and keeps it in a file."""

    def __init__(
        self,
        path: str | os.PathLike[str] = "",
        on_events_loaded: Callable[[list[str]], None] | None = None,
    ) -> None:
        self.path = path
        self.data = SaveData()
        self._on_events_loaded = on_events_loaded

    def load(self) -> bool:
        """Load the save file; create a default one if missing.

        Returns True when an existing file was read.
        """
        if os.path.isfile(self.path):
            try:
                self.data = deserialize_save(load_text(self.path))
            except ValueError as exc:
                _log.error("Error parsing save data: %s", exc)
                self.data = SaveData()
            else:
                _log.info("Save data loaded successfully.")
            if self._on_events_loaded is not None:
                self._on_events_loaded(list(self.data.events_done))
            return True

        _log.info("Save file does not exist. Creating default save data.")
        self.data = default_save_data()
        self.save()
        return False

    def save(self) -> bool:
        if self.save_to_file(self.path, self.data):
            _log.info("Save data saved successfully.")
            return True
        _log.error("Failed to save data.")
        return False

    def save_to_file(self, path: str | os.PathLike[str], data: SaveData) -> bool:
        text = serialize_save(data)
        try:
            with open(path, "wb") as handle:
                handle.write(text.encode("utf-8"))
        except OSError as exc:
            _log.error("Failed to open file for writing: %s (%s)", path, exc)
            return False
        return True

    def set_fish_data(self, money: int, fish_collection: dict[int, int]) -> None:
        self.data.money = money
        self.data.fish_collection = dict(fish_collection)

    def set_module_data(self, first: ModuleData, second: ModuleData) -> None:
        self.data.module1 = replace(first)
        self.data.module2 = replace(second)

    def update(self, new_data: SaveData) -> bool:
        """Replace the current data and write it out."""
        self.data = new_data
        return self.save()

    @property
    def fish_collection(self) -> dict[int, int]:
        return dict(self.data.fish_collection)

    @property
    def money(self) -> int:
        return self.data.money