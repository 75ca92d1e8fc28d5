import pytest

from contfrac.config import ExpansionConfig, get_config, reset_config, resolve_max_steps


def test_defaults(monkeypatch):
    monkeypatch.delenv("CONTFRAC_MAX_STEPS", raising=False)
    monkeypatch.delenv("CONTFRAC_SYMBOLIC_SIMPLIFY", raising=False)
    reset_config()
    cfg = get_config()
    assert cfg.max_steps == 1000
    assert cfg.symbolic_simplify
    assert get_config() is cfg


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CONTFRAC_MAX_STEPS", "25")
    monkeypatch.setenv("CONTFRAC_SYMBOLIC_SIMPLIFY", "off")
    monkeypatch.setenv("CONTFRAC_LOG_LEVEL", "debug")
    reset_config()
    cfg = get_config()
    assert cfg.max_steps == 25
    assert not cfg.symbolic_simplify
    assert cfg.log_level == "DEBUG"
    assert resolve_max_steps(None) == 25
    assert resolve_max_steps(3) == 3


def test_negative_budget():
    with pytest.raises(ValueError):
        ExpansionConfig(max_steps=-1)
    with pytest.raises(ValueError):
        resolve_max_steps(-5)
