# tests/test_cache.py
"""LabCache: on-demand fill, canonical keys, rebuild/clear and concurrent reads."""

from __future__ import annotations

import importlib
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

cache_mod = importlib.import_module("hex_color_matcher.matching.color.cache")
cs = importlib.import_module("hex_color_matcher.matching.color.utils.color_space")


# ---------- Helpers ----------
class _CountingConverter:
    def __init__(self):
        self.calls: list[str] = []

    def __call__(self, hexcode: str):
        self.calls.append(hexcode)
        return cs.hex_to_lab(hexcode)


@pytest.fixture
def counting():
    return _CountingConverter()


# ---------- get ----------
def test_get_computes_once_per_hex(counting):
    cache = cache_mod.LabCache(counting)
    first = cache.get("FF0000")
    second = cache.get("FF0000")
    assert first == second == cs.hex_to_lab("FF0000")
    assert counting.calls == ["FF0000"]


def test_get_keys_on_canonical_hex(counting):
    cache = cache_mod.LabCache(counting)
    cache.get("#ff0000")
    cache.get("FF0000")
    assert len(cache) == 1
    assert "#Ff0000" in cache
    assert counting.calls == ["FF0000"]


def test_contains_rejects_non_strings():
    cache = cache_mod.LabCache()
    assert 123 not in cache


# ---------- rebuild / clear ----------
def test_rebuild_replaces_entries_and_dedupes(counting):
    cache = cache_mod.LabCache(counting)
    cache.get("123456")
    n = cache.rebuild(["FF0000", "#ff0000", "00FF00"])
    assert n == 2
    assert len(cache) == 2
    assert "123456" not in cache
    assert "00FF00" in cache


def test_clear_empties_cache():
    cache = cache_mod.LabCache()
    cache.rebuild(["FF0000", "00FF00"])
    cache.clear()
    assert len(cache) == 0


# ---------- concurrency ----------
def test_concurrent_gets_all_see_one_value():
    cache = cache_mod.LabCache()
    hexes = ["FF0000", "00FF00", "0000FF", "ABCDEF"] * 50

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(cache.get, hexes))

    assert len(cache) == 4
    for hx, lab in zip(hexes, results):
        assert lab == cs.hex_to_lab(hx)
        assert lab is cache.get(hx)


def test_invalidation_during_concurrent_gets_stays_consistent():
    cache = cache_mod.LabCache()
    hexes = [f"{i:02X}{(i * 7) % 256:02X}{(i * 13) % 256:02X}" for i in range(64)]
    expected = {hx: cs.hex_to_lab(hx) for hx in hexes}
    stop = threading.Event()

    def invalidate():
        n = 0
        while not stop.is_set():
            if n % 2:
                cache.clear()
            else:
                cache.rebuild(hexes[: n % len(hexes)])
            n += 1

    def read(hx):
        return hx, cache.get(hx)

    writer = threading.Thread(target=invalidate)
    writer.start()
    try:
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(read, hexes * 20))
    finally:
        stop.set()
        writer.join()

    for hx, lab in results:
        assert lab == expected[hx]
    for hx in hexes:
        assert cache.get(hx) == expected[hx]
