# tests/test_database.py
"""ColorDatabase: read-only views, fade families, copy-on-write edits, loading."""

from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path

import pytest

D = importlib.import_module("hex_color_matcher.matching.database")
LC = importlib.import_module("hex_color_matcher.matching.general.utils.load_config")

ColorDatabase = D.ColorDatabase


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    LC.clear_config_cache()
    yield
    LC.clear_config_cache()


@pytest.fixture
def db():
    return ColorDatabase.from_dict(
        {
            "TARGET_COLORS": {"Fire Red": "FF0000", "Teal": "008080"},
            "FADE_DYES": {"Aurora - Stage 1": "0FFFB0", "Aurora - Stage 2": "20E0C0"},
        },
        {"customColors": {"My Rose": "E8A0B4"}, "wordList": {"BEEF": "BEEF"}},
    )


# ---------- views ----------
def test_views_are_read_only(db):
    with pytest.raises(TypeError):
        db.target_colors["New"] = "000000"
    with pytest.raises(TypeError):
        db.word_list["NEW"] = "ABC"


def test_entries_order_custom_target_fade(db):
    cats = [cat for cat, _name, _hex in db.entries()]
    assert cats == ["custom", "target", "target", "fade", "fade"]
    assert db.all_hexes()[0] == "E8A0B4"
    assert len(db) == 5


def test_category_lookup(db):
    assert db.category("fade") is db.fade_dyes
    with pytest.raises(KeyError):
        db.category("bogus")


def test_from_dict_rejects_non_object_sections():
    with pytest.raises(TypeError):
        ColorDatabase.from_dict({"TARGET_COLORS": ["FF0000"]})


# ---------- fade families ----------
def test_fade_family_and_detection(db):
    assert D.fade_family("Aurora - Stage 3") == "Aurora"
    assert db.fade_families == frozenset({"Aurora"})
    assert db.is_fade_dye("Aurora - Stage 9")
    assert not db.is_fade_dye("Aurora Borealis")
    assert not db.is_fade_dye("Sunset - Stage 1")


# ---------- custom colors ----------
def test_with_custom_color_is_copy_on_write(db):
    new = db.with_custom_color("Sky", "#87ceeb")
    assert new.custom_colors["Sky"] == "87CEEB"
    assert "Sky" not in db.custom_colors
    assert new.target_colors == db.target_colors


def test_with_custom_color_overwrites_existing(db):
    new = db.with_custom_color("My Rose", "FFFFFF")
    assert new.custom_colors["My Rose"] == "FFFFFF"


@pytest.mark.parametrize("bad", ["FFF", "GGGGGG", "1234567", ""])
def test_with_custom_color_rejects_bad_hex(db, bad):
    with pytest.raises(D.InvalidHexError):
        db.with_custom_color("Bad", bad)


def test_without_custom_color(db):
    assert "My Rose" not in db.without_custom_color("My Rose").custom_colors
    with pytest.raises(D.EntryNotFoundError):
        db.without_custom_color("Nope")


# ---------- words ----------
def test_with_word_uppercases(db):
    new = db.with_word("cafe", "cafe")
    assert new.word_list["CAFE"] == "CAFE"
    assert "CAFE" not in db.word_list


def test_with_word_duplicate_raises(db):
    with pytest.raises(D.DuplicateEntryError):
        db.with_word("beef", "BXXF")


@pytest.mark.parametrize("bad", ["", "XYZ", "1234567", "BE EF"])
def test_with_word_rejects_bad_pattern(db, bad):
    with pytest.raises(D.InvalidWordPatternError):
        db.with_word("NEW", bad)


def test_without_word(db):
    assert "BEEF" not in db.without_word("beef").word_list
    with pytest.raises(D.EntryNotFoundError):
        db.without_word("nope")


def test_user_data_shape(db):
    assert db.user_data() == {"customColors": {"My Rose": "E8A0B4"}, "wordList": {"BEEF": "BEEF"}}


# ---------- loading ----------
def test_load_database_from_dir(tmp_path):
    (tmp_path / "colors.json").write_text(
        json.dumps({"TARGET_COLORS": {"Fire Red": "FF0000"}, "FADE_DYES": {}}), encoding="utf-8"
    )
    (tmp_path / "data.json").write_text(
        json.dumps({"customColors": {}, "wordList": {"SUN": "5UNXXX"}}), encoding="utf-8"
    )
    db = D.load_database(base_dir=tmp_path)
    assert dict(db.target_colors) == {"Fire Red": "FF0000"}
    assert dict(db.word_list) == {"SUN": "5UNXXX"}


def test_load_database_missing_files_is_empty(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        db = D.load_database(base_dir=tmp_path)
    assert len(db) == 0
    assert "unavailable" in caplog.text


def test_packaged_reference_data_loads():
    import hex_color_matcher

    data_dir = Path(hex_color_matcher.__file__).parent / "data"
    db = D.load_database(base_dir=data_dir)
    assert db.target_colors["Fire Red"] == "FF0000"
    assert db.is_fade_dye("Sunset - Stage 2")
