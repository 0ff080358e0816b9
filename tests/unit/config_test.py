"""Unit tests for configuration defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from codesync.config import DEFAULT_IGNORE_DIRS, ScanConfig, load_config


def test_default_ignore_set_is_consolidated() -> None:
    assert DEFAULT_IGNORE_DIRS == {
        "node_modules",
        ".git",
        "dist",
        "build",
        ".next",
        "__pycache__",
        ".pytest_cache",
        ".venv",
        "venv",
    }


def test_defaults() -> None:
    config = ScanConfig()
    assert config.ignore_dirs == DEFAULT_IGNORE_DIRS
    assert config.skeleton_languages == {"javascript", "typescript", "python"}
    assert config.diff_lookahead == 5


def test_lookahead_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ScanConfig(diff_lookahead=0)


def test_config_is_frozen() -> None:
    with pytest.raises(ValidationError):
        ScanConfig().diff_lookahead = 3  # type: ignore[misc]


def test_load_config_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CODESYNC_IGNORE_DIRS", "CODESYNC_EXTRA_IGNORE_DIRS", "CODESYNC_DIFF_LOOKAHEAD"):
        monkeypatch.delenv(name, raising=False)
    assert load_config() == ScanConfig()


def test_load_config_replaces_ignore_dirs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODESYNC_IGNORE_DIRS", " vendor, .git ,,")
    monkeypatch.delenv("CODESYNC_EXTRA_IGNORE_DIRS", raising=False)
    assert load_config().ignore_dirs == {"vendor", ".git"}


def test_load_config_extends_ignore_dirs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CODESYNC_IGNORE_DIRS", raising=False)
    monkeypatch.setenv("CODESYNC_EXTRA_IGNORE_DIRS", "coverage")
    assert load_config().ignore_dirs == DEFAULT_IGNORE_DIRS | {"coverage"}


def test_load_config_lookahead(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODESYNC_DIFF_LOOKAHEAD", "8")
    assert load_config().diff_lookahead == 8


@pytest.mark.parametrize("value", ["many", "0"])
def test_load_config_rejects_bad_lookahead(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("CODESYNC_DIFF_LOOKAHEAD", value)
    with pytest.raises(ValueError):
        load_config()
