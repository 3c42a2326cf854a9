# tests/test_ranking.py
"""End-to-end ranking: gathering, filters, exact-first, priority order, caps."""

from __future__ import annotations

import importlib
import logging

import pytest

ranking = importlib.import_module("hex_color_matcher.matching.color.logic.ranking")
db_mod = importlib.import_module("hex_color_matcher.matching.database")
settings_mod = importlib.import_module("hex_color_matcher.matching.settings")
types_mod = importlib.import_module("hex_color_matcher.matching.color.types")

ColorDatabase = db_mod.ColorDatabase
MatcherSettings = settings_mod.MatcherSettings
MatchPriority = settings_mod.MatchPriority
ColorMatch = types_mod.ColorMatch

analyze = ranking.analyze_color


# ──────────────────────────────────────────────────────────────────────────────
# Basics
# ──────────────────────────────────────────────────────────────────────────────
def test_fire_red_exact_match_end_to_end():
    db = ColorDatabase(target_colors={"Fire Red": "FF0000"})
    res = analyze("FF0000", database=db)

    assert res is not None
    assert res.best_match.name == "Fire Red"
    assert res.best_match.delta_e == pytest.approx(0.0, abs=1e-9)
    assert res.tier == 0
    assert res.top_matches == (res.best_match,)


def test_empty_database_returns_none_and_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert analyze("FF0000", database=ColorDatabase()) is None
    assert "No matches found for hex: FF0000" in caplog.text


def test_hash_and_lowercase_input_accepted():
    db = ColorDatabase(target_colors={"Fire Red": "FF0000"})
    res = analyze("#ff0000", database=db)
    assert res.best_match.delta_e == pytest.approx(0.0, abs=1e-9)


def test_malformed_hex_is_scored_as_black():
    db = ColorDatabase(target_colors={"Pure Black": "000000", "Fire Red": "FF0000"})
    res = analyze("ZZZZZZ", database=db)
    assert res.best_match.name == "Pure Black"


def test_top_matches_capped_at_three():
    targets = {f"Gray {i}": f"{i:02X}{i:02X}{i:02X}" for i in range(10, 200, 20)}
    res = analyze("808080", database=ColorDatabase(target_colors=targets))
    assert len(res.top_matches) == 3


def test_far_matches_sorted_by_delta_e():
    db = ColorDatabase(target_colors={"Far": "0000FF", "Farther": "00FFFF", "Near": "FF00FF"})
    res = analyze("FF0000", database=db)
    assert all(m.tier == 3 for m in res.top_matches)
    des = [m.delta_e for m in res.top_matches]
    assert des == sorted(des)


# ──────────────────────────────────────────────────────────────────────────────
# Exact matches & priority order
# ──────────────────────────────────────────────────────────────────────────────
def test_exact_match_first_regardless_of_priority():
    db = ColorDatabase(target_colors={"Exact": "808080"}, custom_colors={"Near": "808081"})
    settings = MatcherSettings(match_priorities=(MatchPriority.CUSTOM_T1,))
    res = analyze("808080", database=db, settings=settings)

    assert res.best_match.name == "Exact"
    assert res.top_matches[1].name == "Near"


def test_equal_delta_e_keeps_custom_before_target():
    db = ColorDatabase(target_colors={"Target": "FF0000"}, custom_colors={"Mine": "FF0000"})
    res = analyze("FF0000", database=db)

    assert [m.name for m in res.top_matches] == ["Mine", "Target"]
    # custom colors never reach tier 0
    assert res.tier == 1


def test_priority_order_changes_ranking():
    db = ColorDatabase(
        target_colors={"Normal": "FF0101"},
        fade_dyes={"Sunset - Stage 1": "FF0000"},
    )
    default = analyze("FE0000", database=db)
    assert default.best_match.name == "Normal"

    fades_first = MatcherSettings(
        match_priorities=(MatchPriority.FADE_T0, MatchPriority.FADE_T1, MatchPriority.FADE_T2)
    )
    res = analyze("FE0000", database=db, settings=fades_first)
    assert res.best_match.name == "Sunset - Stage 1"
    assert res.best_match.is_fade


# ──────────────────────────────────────────────────────────────────────────────
# Flags & filters
# ──────────────────────────────────────────────────────────────────────────────
def test_high_fades_hidden_when_flag_off():
    db = ColorDatabase(fade_dyes={"Aurora - Stage 1": "0000FF"})

    shown = analyze("FF0000", database=db)
    assert shown.best_match.is_fade and shown.tier == 3

    hidden = analyze("FF0000", database=db, settings=MatcherSettings(show_high_fades=False))
    assert hidden is None


def test_fade_and_custom_flags_skip_categories():
    db = ColorDatabase(
        target_colors={"Target": "FF0000"},
        fade_dyes={"Aurora - Stage 1": "FF0000"},
        custom_colors={"Mine": "FF0000"},
    )
    settings = MatcherSettings(fade_dyes_enabled=False, custom_colors_enabled=False)
    res = analyze("FF0000", database=db, settings=settings)
    assert [m.name for m in res.top_matches] == ["Target"]


def test_piece_specific_filter_uses_item_name():
    db = ColorDatabase(target_colors={"Leather Boots": "FF0000", "Witch Hat": "FF0101"})
    settings = MatcherSettings(piece_specific_enabled=True)

    res = analyze("FF0000", "Wizard Hat", database=db, settings=settings)
    assert [m.name for m in res.top_matches] == ["Witch Hat"]

    unfiltered = analyze("FF0000", "Wizard Hat", database=db)
    assert unfiltered.best_match.name == "Leather Boots"


def test_three_piece_sets_hidden_on_helmets_except_top_hat():
    db = ColorDatabase(target_colors={"Frost 3p": "A0D8EF", "Frost 3p Top Hat": "A0D8F0"})

    helmet = analyze("A0D8EF", "Wizard Hat", database=db)
    assert [m.name for m in helmet.top_matches] == ["Frost 3p Top Hat"]

    off = MatcherSettings(three_piece_sets_enabled=False)
    res = analyze("A0D8EF", "Wizard Hat", database=db, settings=off)
    assert res.best_match.name == "Frost 3p"


# ──────────────────────────────────────────────────────────────────────────────
# rank_matches in isolation
# ──────────────────────────────────────────────────────────────────────────────
def test_rank_matches_caps_pool_and_orders_groups():
    index = MatcherSettings().priority_index()
    cands = [ColorMatch(f"far{i}", "000000", 10.0 + i, 0, 3) for i in range(8)]
    cands += [
        ColorMatch("fade", "000000", 0.5, 0, 0, is_fade=True),
        ColorMatch("normal", "000000", 1.5, 0, 1),
        ColorMatch("exact", "000000", 0.001, 0, 0),
        ColorMatch("ignored", "000000", 99.0, 0, 3),
    ]
    ranked = ranking.rank_matches(cands, index)

    assert len(ranked) == 10
    assert [m.name for m in ranked[:3]] == ["exact", "normal", "fade"]
    assert "ignored" not in {m.name for m in ranked}
    assert [m.name for m in ranked[3:]] == [f"far{i}" for i in range(7)]
