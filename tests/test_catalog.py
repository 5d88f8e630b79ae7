import json
import random
import threading

import pytest

from gamebrowser.catalog import build_catalog, load_catalog, load_entries, sort_entries
from gamebrowser.models import Entry, LoadError


def _titles(entries):
    return [e.title for e in entries]


def test_scenario_categories_and_ids():
    raw = [Entry(title="The Avengers"), Entry(title="Zelda"), Entry(title="an Odyssey")]
    cat = build_catalog(raw)
    assert _titles(cat.entries) == ["The Avengers", "an Odyssey", "Zelda"]
    assert [c.name for c in cat.categories] == ["A", "O", "Z"]
    assert [c.icon for c in cat.categories] == ["A", "O", "Z"]
    assert [e.launch_id for e in cat.entries] == [0, 1, 2]
    assert [e.category for e in cat.entries] == ["A", "O", "Z"]


def test_sort_is_stable_for_equal_normalized_titles():
    raw = [
        Entry(title="Doom", command="first"),
        Entry(title="Alpha"),
        Entry(title="the doom", command="second"),
        Entry(title="DOOM ", command="third"),
    ]
    cat = build_catalog(raw)
    assert [e.command for e in cat.entries if e.category == "D"] == ["first", "second", "third"]
    assert [e.title for e in sort_entries(raw)][0] == "Alpha"


def test_ids_are_dense_and_categories_follow_first_appearance():
    titles = ["banjo", "Bomberman", "The Castle", "a Bard", "cave", "", "Aero", "  "]
    cat = build_catalog([Entry(title=t) for t in titles])
    assert sorted(e.launch_id for e in cat.entries) == list(range(len(titles)))
    assert [e.launch_id for e in cat.entries] == list(range(len(titles)))
    # empty titles sort first and share one sentinel category
    assert [c.name for c in cat.categories] == ["", "A", "B", "C"]
    names = {c.name for c in cat.categories}
    assert all(e.category in names for e in cat.entries)


def test_source_category_is_overwritten_and_input_untouched():
    raw = [Entry(title="Metroid", category="Sci-Fi")]
    cat = build_catalog(raw)
    assert cat.entries[0].category == "M"
    assert raw[0].category == "Sci-Fi"
    assert raw[0].launch_id is None


def test_rebuild_is_deterministic():
    raw = [Entry(title=t) for t in ["Zork", "the zork", "Asteroids", "Pong"]]
    assert build_catalog(raw) == build_catalog(raw)


def test_resort_keeps_invariants():
    cat = build_catalog([Entry(title=t) for t in ["Zork", "Asteroids", "the Pong", "pong"]])
    before = (list(cat.categories), list(cat.entries))
    categories, entries = cat.view()
    assert (list(categories), list(entries)) == before
    cat.resort()
    assert [e.launch_id for e in cat.entries] == [0, 1, 2, 3]


def test_load_entries_is_lenient_about_missing_fields(games_json):
    entries = load_entries(games_json)
    assert len(entries) == 3
    avengers = entries[1]
    assert avengers.title == "The Avengers"
    assert avengers.category == ""
    assert avengers.command == "avengers.exe"
    assert entries[0].box_art == "art/zelda.png"


def test_load_entries_matches_keys_case_insensitively(tmp_path):
    p = tmp_path / "games.json"
    p.write_text(json.dumps([{"title": "Tetris", "exec": "tetris", "boxart": None, "Extra": 1}]), encoding="utf-8")
    [e] = load_entries(p)
    assert (e.title, e.command, e.box_art) == ("Tetris", "tetris", "")


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps({"Title": "not a list"}),
    json.dumps(["just a string"]),
    json.dumps([{"Title": 42}]),
])
def test_load_entries_rejects_malformed_sources(tmp_path, content):
    p = tmp_path / "games.json"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(LoadError):
        load_entries(p)


def test_missing_file_is_a_load_error(tmp_path):
    with pytest.raises(LoadError):
        load_catalog(tmp_path / "nope.json")


def test_load_catalog(games_json):
    cat = load_catalog(games_json)
    assert [c.name for c in cat.categories] == ["A", "O", "Z"]
    assert len(cat) == 3


def test_empty_input_builds_empty_catalog():
    cat = build_catalog([])
    assert cat.categories == []
    assert cat.entries == []
    assert len(cat) == 0


def test_resort_restores_order_after_shuffle():
    titles = ["Zork", "Asteroids", "the Pong", "Metroid", "an Elite", "Kirby"]
    cat = build_catalog([Entry(title=t) for t in titles])
    expected = list(cat.entries)
    random.Random(7).shuffle(cat.entries)
    cat.resort()
    assert cat.entries == expected
    assert [e.launch_id for e in cat.entries] == list(range(len(titles)))
    assert [cat.get(i).launch_id for i in range(len(titles))] == list(range(len(titles)))


def test_lookups_during_concurrent_resorts():
    titles = [f"Game {i:03d}" for i in range(200)]
    cat = build_catalog([Entry(title=t) for t in titles])
    errors = []
    stop = threading.Event()

    def _render():
        while not stop.is_set():
            categories, entries = cat.view()
            if len(entries) != len(titles):
                errors.append("short view")

    def _lookup():
        try:
            for _ in range(20):
                for i in range(len(titles)):
                    if cat.get(i).launch_id != i:
                        errors.append(f"wrong entry for {i}")
        except Exception as e:
            errors.append(repr(e))

    renderers = [threading.Thread(target=_render) for _ in range(2)]
    lookups = [threading.Thread(target=_lookup) for _ in range(2)]
    for t in renderers + lookups:
        t.start()
    for t in lookups:
        t.join(30)
    stop.set()
    for t in renderers:
        t.join(30)
    assert errors == []
