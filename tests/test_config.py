"""Tests for settings resolved from the environment in :mod:`config`."""

from __future__ import annotations

import logging

import pytest

from config import DEFAULT_LOG_LEVEL, resolve_log_level


@pytest.mark.parametrize("raw, expected", [
    ("debug", "DEBUG"),
    (" Warning ", "WARNING"),
    ("ERROR", "ERROR"),
])
def test_known_levels_are_accepted(raw, expected) -> None:
    assert resolve_log_level(raw) == expected


@pytest.mark.parametrize("raw", ["verbose", "", None, "10"])
def test_unknown_levels_fall_back_to_default(raw) -> None:
    assert resolve_log_level(raw) == DEFAULT_LOG_LEVEL


def test_resolved_level_is_accepted_by_logging() -> None:
    logger = logging.getLogger("tests.config")
    logger.setLevel(resolve_log_level("verbose"))
    assert logger.level == logging.INFO
