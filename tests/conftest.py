"""Shared pytest fixtures for eventwhen."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from eventwhen import config, temporal, tokens


@pytest.fixture()
def use_settings(monkeypatch):
    """Swap the settings object seen by the modules that read it."""

    def apply(**overrides):
        updated = replace(config.settings, **overrides)
        for module in (config, temporal, tokens):
            monkeypatch.setattr(module, "settings", updated)
        return updated

    return apply


@pytest.fixture(autouse=True)
def utc_default(use_settings):
    """Pin the default zone so results do not depend on the host's clock."""

    use_settings(default_timezone="UTC", time_match_tolerance_minutes=1)
