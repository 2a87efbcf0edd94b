"""Dialog scripts and a typewriter-style dialog box that plays them."""

from __future__ import annotations

import json
import os
import random
from typing import Any, Iterable, Mapping

DEFAULT_SPEED = 0.05
DEFAULT_ROOT = "assets/jsons/dialog"

Line = tuple[str, str]


def _read_line(entry: Any, group_id: str, rng: random.Random) -> Line:
    if not isinstance(entry, dict):
        raise ValueError(f"dialog group {group_id!r}: lines must be objects")
    character = entry.get("character")
    if not isinstance(character, str):
        raise ValueError(f"dialog group {group_id!r}: 'character' must be a string")
    text = entry.get("text")
    if isinstance(text, list):
        if not text:
            raise ValueError(f"dialog group {group_id!r}: 'text' list is empty")
        text = text[rng.randrange(len(text))]
    if not isinstance(text, str):
        raise ValueError(f"dialog group {group_id!r}: 'text' must be a string")
    return character, text


class DialogBook:
    """Dialog lines grouped by id, each line a (character, text) pair."""

    def __init__(self, groups: Mapping[str, Iterable[Line]]) -> None:
        self._groups: dict[str, list[Line]] = {
            group_id: [(str(who), str(what)) for who, what in lines]
            for group_id, lines in groups.items()
        }
        self._translations: dict[str, str] = {}
        self._characters: dict[str, str] = {}

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], rng: random.Random | None = None
    ) -> DialogBook:
        """Read a dialog file.

        A line whose text is a list gets one of its strings, picked at
        random. Members that are not lists are skipped. Raises OSError when
        the file cannot be read and ValueError when its content is malformed.
        """
        rng = rng if rng is not None else random.Random()
        with open(path, "rb") as handle:
            raw = handle.read()
        try:
            doc = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValueError(f"JSON parse error in {os.fspath(path)}: {exc}") from exc
        if not isinstance(doc, dict):
            raise ValueError("dialog file must hold a JSON object")

        groups: dict[str, list[Line]] = {}
        for group_id, lines in doc.items():
            if not isinstance(lines, list):
                continue
            groups[group_id] = [_read_line(entry, group_id, rng) for entry in lines]
        return cls(groups)

    def group(self, group_id: str) -> list[Line]:
        """Lines of a group, or an empty list when there is no such group."""
        return list(self._groups.get(group_id, ()))

    def text(self, line_id: str) -> str:
        """Translated text for a line id, or an empty string."""
        return self._translations.get(line_id, "")

    def character(self, line_id: str) -> str:
        """Speaker for a line id, or an empty string."""
        return self._characters.get(line_id, "")


def load_dialog_book(
    language: str,
    root: str | os.PathLike[str] = DEFAULT_ROOT,
    rng: random.Random | None = None,
) -> DialogBook:
    """Load the dialog book for a language from ``<root>/<language>.json``."""
    return DialogBook.from_file(os.path.join(root, f"{language}.json"), rng)


class Dialog:
    """Reveals dialog lines one character at a time."""

    def __init__(self, book: DialogBook, rng: random.Random | None = None) -> None:
        self.book = book
        self._rng = rng if rng is not None else random.Random()
        self.full_text = ""
        self.displayed_text = ""
        self.character = ""
        self.typing_speed = DEFAULT_SPEED
        self.is_typing = False
        self.visible = False
        self._elapsed = 0.0
        self._char_index = 0
        self._lines: list[Line] = []
        self._line_index = 0
        self._finished = False

    def load_group(self, group_id: str, speed: float = DEFAULT_SPEED) -> None:
        """Start playing a whole group from its first line."""
        self._finished = False
        self._lines = self.book.group(group_id)
        self._line_index = 0
        self.typing_speed = speed
        self._start_line(self._line_index)
        self.visible = True

    def load_random(self, group_id: str, speed: float = DEFAULT_SPEED) -> None:
        """Play one line picked at random from a group; nothing if it is empty."""
        lines = self.book.group(group_id)
        if not lines:
            return
        self.character, self.full_text = lines[self._rng.randrange(len(lines))]
        self.displayed_text = ""
        self._char_index = 0
        self._elapsed = 0.0
        self.typing_speed = speed
        self.is_typing = True
        self.visible = True

    def _start_line(self, index: int) -> None:
        if index >= len(self._lines):
            self.is_typing = False
            return
        self.character, self.full_text = self._lines[index]
        self.displayed_text = ""
        self._char_index = 0
        self._elapsed = 0.0
        self.is_typing = True

    def next_line(self) -> None:
        """Finish the current line, or move on, or close at the end."""
        if self.is_typing:
            self.displayed_text = self.full_text
            self._char_index = len(self.full_text)
            self.is_typing = False
        elif self._line_index + 1 < len(self._lines):
            self._line_index += 1
            self._start_line(self._line_index)
        else:
            self.hide()

    def update(self, dt: float) -> None:
        """Reveal as many characters as ``dt`` seconds allow."""
        if not self.is_typing and self.is_finished():
            self.hide()
            return
        if not self.is_typing:
            return

        self._elapsed += dt
        while (
            self._elapsed >= self.typing_speed
            and self._char_index < len(self.full_text)
        ):
            self._elapsed -= self.typing_speed
            self.displayed_text += self.full_text[self._char_index]
            self._char_index += 1
            if self._char_index >= len(self.full_text):
                self.is_typing = False
                break

    def hide(self) -> None:
        """Close the box and mark the dialog finished."""
        self.visible = False
        self.is_typing = False
        self.displayed_text = ""
        self.full_text = ""
        self._lines = []
        self._finished = True
        self.character = ""
        self._char_index = 0

    def is_finished(self) -> bool:
        return self._finished