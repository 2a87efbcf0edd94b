import json
import random

import pytest

from reefbeat.dialog import Dialog, DialogBook, load_dialog_book


def _write(path, doc):
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


@pytest.fixture
def book():
    return DialogBook(
        {
            "intro": [("Me", "Hi"), ("Perry", "Hello there")],
            "single": [("Sellerkeeper", "Buy")],
            "empty": [],
        }
    )


def test_from_file_reads_groups(tmp_path):
    path = _write(
        tmp_path / "en.json",
        {"intro": [{"character": "Me", "text": "Hi"}, {"character": "Perry", "text": "Yo"}]},
    )
    loaded = DialogBook.from_file(path)
    assert loaded.group("intro") == [("Me", "Hi"), ("Perry", "Yo")]


def test_from_file_picks_one_of_text_options(tmp_path):
    options = ["a", "b", "c"]
    path = _write(tmp_path / "en.json", {"g": [{"character": "Me", "text": options}]})
    loaded = DialogBook.from_file(path, random.Random(3))
    [(who, what)] = loaded.group("g")
    assert who == "Me"
    assert what in options


def test_from_file_skips_non_array_members(tmp_path):
    path = _write(
        tmp_path / "en.json",
        {"meta": "x", "g": [{"character": "Me", "text": "Hi"}]},
    )
    loaded = DialogBook.from_file(path)
    assert loaded.group("meta") == []
    assert loaded.group("g") == [("Me", "Hi")]


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        DialogBook.from_file(tmp_path / "none.json")


def test_from_file_bad_json_raises(tmp_path):
    path = tmp_path / "en.json"
    path.write_text("{ nope", encoding="utf-8")
    with pytest.raises(ValueError):
        DialogBook.from_file(path)


def test_from_file_not_object_raises(tmp_path):
    path = _write(tmp_path / "en.json", [1, 2])
    with pytest.raises(ValueError):
        DialogBook.from_file(path)


def test_from_file_missing_character_raises(tmp_path):
    path = _write(tmp_path / "en.json", {"g": [{"text": "Hi"}]})
    with pytest.raises(ValueError):
        DialogBook.from_file(path)


def test_load_dialog_book_uses_language_file(tmp_path):
    _write(tmp_path / "ko.json", {"g": [{"character": "Me", "text": "An"}]})
    loaded = load_dialog_book("ko", root=tmp_path)
    assert loaded.group("g") == [("Me", "An")]


def test_unknown_lookups_are_empty(book):
    assert book.group("nope") == []
    assert book.text("nope") == ""
    assert book.character("nope") == ""


def test_group_returns_copy(book):
    lines = book.group("intro")
    lines.clear()
    assert len(book.group("intro")) == 2


def test_typing_reveals_characters(book):
    dialog = Dialog(book)
    dialog.load_group("intro", speed=0.5)
    assert dialog.visible
    assert dialog.character == "Me"
    dialog.update(0.5)
    assert dialog.displayed_text == "H"
    dialog.update(0.5)
    assert dialog.displayed_text == "Hi"
    assert not dialog.is_typing


def test_next_line_completes_then_advances_then_hides(book):
    dialog = Dialog(book)
    dialog.load_group("intro")
    dialog.next_line()
    assert dialog.displayed_text == "Hi"
    assert not dialog.is_typing
    dialog.next_line()
    assert dialog.character == "Perry"
    assert dialog.full_text == "Hello there"
    assert dialog.displayed_text == ""
    dialog.next_line()
    dialog.next_line()
    assert dialog.is_finished()
    assert not dialog.visible
    assert dialog.character == ""


def test_update_hides_finished_dialog(book):
    dialog = Dialog(book)
    dialog.load_group("single")
    dialog.next_line()
    dialog.next_line()
    assert dialog.is_finished()
    dialog.visible = True
    dialog.update(1.0)
    assert not dialog.visible


def test_load_group_resets_finished(book):
    dialog = Dialog(book)
    dialog.hide()
    assert dialog.is_finished()
    dialog.load_group("intro")
    assert not dialog.is_finished()


def test_load_random_picks_line_from_group(book):
    dialog = Dialog(book, random.Random(7))
    dialog.load_random("intro", speed=0.5)
    assert (dialog.character, dialog.full_text) in book.group("intro")
    assert dialog.is_typing
    assert dialog.visible


def test_load_random_empty_group_does_nothing(book):
    dialog = Dialog(book)
    dialog.load_random("empty")
    assert not dialog.visible
    assert dialog.full_text == ""