import pytest

from cpsudoku.config import ENV_CONFIG, load_settings, merge_overrides


def test_defaults(monkeypatch):
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    s = load_settings()
    assert s.verbose is False
    assert s.max_attempts == 0
    assert s.seed is None


def test_yaml_and_overrides(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    p = tmp_path / "settings.yaml"
    p.write_text("verbose: true\nmax_attempts: 50\nseed: 9\n", encoding="utf-8")
    s = load_settings(p, max_attempts=None, seed=1)
    assert s.verbose is True
    assert s.max_attempts == 50
    assert s.seed == 1


def test_env_path(tmp_path, monkeypatch):
    p = tmp_path / "env.yaml"
    p.write_text("max_attempts: 4\n", encoding="utf-8")
    monkeypatch.setenv(ENV_CONFIG, str(p))
    assert load_settings().max_attempts == 4


def test_unknown_key_rejected(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("threads: 4\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(p)


def test_negative_attempts_rejected(monkeypatch):
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    with pytest.raises(ValueError):
        load_settings(max_attempts=-1)


def test_merge_overrides_skips_none():
    assert merge_overrides({"a": 1}, a=None, b=2) == {"a": 1, "b": 2}


def test_shipped_default_config(monkeypatch):
    from conftest import ROOT

    monkeypatch.delenv(ENV_CONFIG, raising=False)
    s = load_settings(ROOT / "configs" / "default.yaml")
    assert s.max_attempts == 0
    assert s.seed is None
