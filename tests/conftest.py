"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from datetime import UTC, datetime
from pathlib import Path

import pytest

HEADER = """# some leading comments followed by whitespace

127.0.0.1   localhost
10.0.0.9    other.name"""

LIVE_LINE = '127.0.0.1\tfoo.local\t# eha {"expiry":"2099-01-01T00:00:00Z","comment":"hello world"}'
EXPIRED_LINE = '127.0.0.1\tfoo.local\t# eha {"expiry":"2001-01-01T00:00:00Z","comment":"hello world"}'


@pytest.fixture
def now() -> datetime:
    """Fixed current instant."""
    return datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


@pytest.fixture
def header_text() -> str:
    """Hosts file with opaque lines only."""
    return HEADER


@pytest.fixture
def live_hosts_text() -> str:
    """Hosts file with opaque lines and one far-future managed entry."""
    return f"{HEADER}\n{LIVE_LINE}"


@pytest.fixture
def expired_hosts_text() -> str:
    """Hosts file with opaque lines and one expired managed entry."""
    return f"{HEADER}\n{EXPIRED_LINE}"


@pytest.fixture
def hosts_file(tmp_path: Path, live_hosts_text: str) -> Path:
    """Hosts file on disk containing a live managed entry."""
    path = tmp_path / "hosts"
    path.write_text(live_hosts_text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the user's real config and environment."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg-config")))
    monkeypatch.delenv("EHA_HOSTS_FILE", raising=False)
