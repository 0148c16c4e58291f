"""Tests for environment overrides."""

import pytest

from tip_jobs import config


def test_env_int(monkeypatch):
    monkeypatch.setenv("TIP_X", "12")
    assert config.env_int("TIP_X", 1) == 12
    monkeypatch.setenv("TIP_X", "")
    assert config.env_int("TIP_X", 1) == 1


def test_env_int_rejects_garbage(monkeypatch):
    monkeypatch.setenv("TIP_X", "twelve")
    with pytest.raises(ValueError, match="TIP_X"):
        config.env_int("TIP_X", 1)


def test_env_float(monkeypatch):
    monkeypatch.setenv("TIP_Y", "0.25")
    assert config.env_float("TIP_Y", 0.5) == 0.25
    monkeypatch.delenv("TIP_Y")
    assert config.env_float("TIP_Y", 0.5) == 0.5


def test_env_floats(monkeypatch):
    assert config.env_floats("TIP_Z", [0.75, 0.25]) == (0.75, 0.25)
    monkeypatch.setenv("TIP_Z", "0,6,10,16,20,24")
    assert config.env_floats("TIP_Z", ()) == (0.0, 6.0, 10.0, 16.0, 20.0, 24.0)
    monkeypatch.setenv("TIP_Z", "0,six")
    with pytest.raises(ValueError, match="TIP_Z"):
        config.env_floats("TIP_Z", ())


def test_defaults():
    assert config.SPLIT_WEIGHTS == (0.75, 0.25)
    assert config.SPLIT_SEED == 123
    assert config.TIP_THRESHOLD == 0.5
    assert config.HOUR_SPLITS == (0, 6, 10, 16, 20, 24)


def test_run_dir(tmp_path):
    assert config.run_dir(str(tmp_path), "20240101_120000") == str(tmp_path / "run_20240101_120000")
