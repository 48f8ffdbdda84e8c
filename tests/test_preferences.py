import json

from reid_viewer.utils.preferences import Preferences


def test_defaults(tmp_path):
    prefs = Preferences(tmp_path)
    assert prefs.get("dataset.images_subdir") == "images"
    assert prefs.get("dataset.similarity_file") == "cos_similarity.csv"
    assert prefs.get("ui.max_image_size") == 700
    assert prefs.get("missing.key", "fallback") == "fallback"


def test_set_persists(tmp_path):
    prefs = Preferences(tmp_path)
    prefs.set("dataset.last_directory", "/data/reid")
    reloaded = Preferences(tmp_path)
    assert reloaded.get("dataset.last_directory") == "/data/reid"
    assert reloaded.get("ui.window_width") == 1400


def test_saved_values_merge_with_defaults(tmp_path):
    (tmp_path / "preferences.json").write_text(json.dumps({"ui": {"max_image_size": 300}}))
    prefs = Preferences(tmp_path)
    assert prefs.get("ui.max_image_size") == 300
    assert prefs.get("ui.window_height") == 900


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "preferences.json").write_text("{not json")
    prefs = Preferences(tmp_path)
    assert prefs.get("dataset.images_subdir") == "images"


def test_reset_does_not_leak_into_defaults(tmp_path):
    prefs = Preferences(tmp_path)
    prefs.set("ui.max_image_size", 100)
    prefs.reset()
    assert prefs.get("ui.max_image_size") == 700
    assert prefs.defaults["ui"]["max_image_size"] == 700
