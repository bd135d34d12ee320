"""Tests for settings and logging context."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from bkmtree.config import load_settings
from bkmtree.logging import _ContextFilter, bookmarks_context


def test_load_settings_from_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """It should read BKMTREE_ variables from the file named by BKMTREE_ENV_FILE."""

    env_file = tmp_path / "custom.env"
    env_file.write_text("BKMTREE_BOOKMARKS_SUFFIX=.outline\nBKMTREE_LOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("BKMTREE_ENV_FILE", str(env_file))

    settings = load_settings()
    assert settings.bookmarks_suffix == ".outline"
    assert settings.log_level == "DEBUG"
    assert settings.encoding == "utf-8"


def test_load_settings_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """It should fall back to defaults without env file or variables."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BKMTREE_ENV_FILE", raising=False)
    monkeypatch.delenv("BKMTREE_BOOKMARKS_SUFFIX", raising=False)
    assert load_settings().bookmarks_suffix == ".bkm"


def test_bookmarks_context_tags_records() -> None:
    """It should expose the current file on log records and reset afterwards."""

    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    with bookmarks_context("a/report.pdf.bkm"):
        _ContextFilter().filter(record)
        assert record.bkm_path == "a/report.pdf.bkm"  # type: ignore[attr-defined]

    _ContextFilter().filter(record)
    assert record.bkm_path == "-"  # type: ignore[attr-defined]
