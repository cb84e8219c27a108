"""Tests for environment-driven configuration."""

import pytest

from courtflow.config import AnimationConfig, get_config, set_config
from courtflow.errors import NotFoundError, ValidationError


@pytest.fixture(autouse=True)
def reset_config():
    set_config(None)
    yield
    set_config(None)


class TestAnimationConfig:
    def test_defaults(self, monkeypatch):
        for name in ("COURTFLOW_DEFAULT_DURATION_MS", "COURTFLOW_DEFAULT_FPS", "COURTFLOW_DATA_DIR"):
            monkeypatch.delenv(name, raising=False)
        config = AnimationConfig.from_env()
        assert config.default_duration_ms == 10000
        assert config.default_fps == 30
        assert config.data_dir is None
        assert config.validate() == []

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("COURTFLOW_DEFAULT_FPS", "60")
        monkeypatch.setenv("COURTFLOW_DATA_DIR", str(tmp_path))
        config = get_config()
        assert config.default_fps == 60
        assert config.data_dir == str(tmp_path)

    def test_validate_reports_problems(self):
        config = AnimationConfig(default_fps=0, default_duration_ms=50000)
        errors = config.validate()
        assert len(errors) == 2
        assert any("FPS" in e for e in errors)

    def test_singleton(self):
        assert get_config() is get_config()


class TestErrors:
    def test_validation_error_names_field(self):
        error = ValidationError("bad", field="duration")
        assert error.status_code == 400
        assert error.to_dict() == {"message": "bad", "field": "duration"}

    def test_not_found_message(self):
        error = NotFoundError("Play", "p-1")
        assert error.status_code == 404
        assert str(error) == "Play not found: p-1"
