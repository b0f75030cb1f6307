import builtins
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))

import protomix  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_engine(monkeypatch):
    """Give every test default settings and an untouched builtins namespace."""
    monkeypatch.delenv(protomix.config.CONFIG_ENV, raising=False)
    protomix.set_config(None)
    had_global = hasattr(builtins, "Protocol")
    saved = getattr(builtins, "Protocol", None)
    yield
    protomix.set_config(None)
    if had_global:
        builtins.Protocol = saved
    elif hasattr(builtins, "Protocol"):
        del builtins.Protocol
