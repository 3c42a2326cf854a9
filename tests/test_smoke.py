from pathlib import Path

from hex_color_matcher import ColorMatcher, load_database, load_settings
from hex_color_matcher.matching.general.utils import clear_config_cache

DATA = Path(__file__).resolve().parents[1] / "src" / "hex_color_matcher" / "data"


def test_smoke():
    clear_config_cache()
    matcher = ColorMatcher(load_database(base_dir=DATA), load_settings(base_dir=DATA))
    out = matcher.analyze("#DC143D", "Leather Boots").to_dict()
    assert isinstance(out, dict)
    assert out["best_match"]["name"] == "Crimson"
    assert 1 <= len(out["top_matches"]) <= 3
    for item in out["top_matches"]:
        assert "name" in item and "delta_e" in item
        assert len(item["target_hex"]) == 6
