import pytest

from sitwatch import config


class TestPositiveSeconds:
    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("SITWATCH_TEST_SECONDS", raising=False)
        assert config._positive_seconds("SITWATCH_TEST_SECONDS", 42.0) == 42.0

    def test_default_when_blank(self, monkeypatch):
        monkeypatch.setenv("SITWATCH_TEST_SECONDS", "  ")
        assert config._positive_seconds("SITWATCH_TEST_SECONDS", 42.0) == 42.0

    def test_override(self, monkeypatch):
        monkeypatch.setenv("SITWATCH_TEST_SECONDS", "90")
        assert config._positive_seconds("SITWATCH_TEST_SECONDS", 42.0) == 90.0

    @pytest.mark.parametrize("raw", ["abc", "0", "-5", "nan", "inf", "-inf", "infinity"])
    def test_rejects_bad_values(self, monkeypatch, raw):
        monkeypatch.setenv("SITWATCH_TEST_SECONDS", raw)
        with pytest.raises(ValueError):
            config._positive_seconds("SITWATCH_TEST_SECONDS", 42.0)


def test_defaults_are_positive():
    assert config.MAX_SITTING_TIME > 0
    assert config.MAX_STANDING_TIME > 0
    assert config.TICK_INTERVAL > 0
