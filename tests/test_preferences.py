import pytest

from catalogo.api.preferences import PreferenceStore


def test_default_theme_when_missing(tmp_path):
    assert PreferenceStore(tmp_path / "prefs.json").get_theme() == "light"


def test_set_theme_persists(tmp_path):
    path = tmp_path / "nested" / "prefs.json"
    prefs = PreferenceStore(path)
    assert prefs.set_theme("dark") == "dark"
    assert PreferenceStore(path).get_theme() == "dark"
    assert prefs.set_theme("light") == "light"
    assert PreferenceStore(path).get_theme() == "light"


def test_interrupted_write_keeps_previous_theme(tmp_path, monkeypatch):
    path = tmp_path / "prefs.json"
    prefs = PreferenceStore(path)
    prefs.set_theme("dark")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("catalogo.data.loader.os.replace", fail_replace)
    with pytest.raises(OSError):
        prefs.set_theme("light")

    assert PreferenceStore(path).get_theme() == "dark"
    assert [p.name for p in tmp_path.iterdir()] == ["prefs.json"]


def test_corrupt_file_falls_back(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text("{broken", encoding="utf-8")
    assert PreferenceStore(path).get_theme() == "light"
    path.write_text('{"theme": "sepia"}', encoding="utf-8")
    assert PreferenceStore(path).get_theme() == "light"


def test_rejects_unknown_theme(tmp_path):
    with pytest.raises(ValueError):
        PreferenceStore(tmp_path / "prefs.json").set_theme("sepia")
