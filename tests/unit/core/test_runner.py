"""Unit tests for request orchestration."""

from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest
from eha.core.hosts import HostsReadError
from eha.core.runner import run_request
from eha.core.validation import ValidationError
from eha.models.request import AddRequest, PruneRequest, RemoveRequest

from tests.conftest import HEADER


class TestRunRequest:
    """Tests for run_request function."""

    def test_dry_run_returns_content_without_writing(
        self, hosts_file: Path, live_hosts_text: str, now: datetime
    ) -> None:
        """Dry-run returns the new contents and leaves the file alone."""
        result = run_request(hosts_file, RemoveRequest(name="foo.local"), now, dry_run=True)

        assert result.content == HEADER
        assert not result.written
        assert result.summary.removed == 1
        assert hosts_file.read_text(encoding="utf-8") == live_hosts_text

    def test_dry_run_never_calls_writer(self, hosts_file: Path, now: datetime) -> None:
        """Dry-run bypasses the atomic writer entirely."""
        with patch("eha.core.runner.write_hosts") as mock_write:
            run_request(hosts_file, PruneRequest(), now, dry_run=True)

        mock_write.assert_not_called()

    def test_real_mode_writes_reconciled_store(self, hosts_file: Path, now: datetime) -> None:
        """The reconciled store is handed to write_hosts."""
        with patch("eha.core.runner.write_hosts") as mock_write:
            result = run_request(hosts_file, RemoveRequest(name="foo.local"), now)

        mock_write.assert_called_once()
        path, store = mock_write.call_args.args
        assert path == hosts_file
        assert store.render() == result.content == HEADER

    def test_add_writes_file(self, tmp_path: Path, header_text: str, now: datetime) -> None:
        """A real-mode add leaves the new managed line on disk."""
        path = tmp_path / "hosts"
        path.write_text(header_text, encoding="utf-8")

        result = run_request(path, AddRequest(name="foo.local", ttl_minutes=1), now)

        content = path.read_text(encoding="utf-8")
        assert result.written
        assert content == result.content
        assert "127.0.0.1\tfoo.local\t# eha {" in content
        assert content.startswith(header_text + "\n")

    def test_noop_prune_is_byte_identical(
        self, hosts_file: Path, live_hosts_text: str, now: datetime
    ) -> None:
        """Pruning without expired entries rewrites identical bytes."""
        result = run_request(hosts_file, PruneRequest(), now)

        assert result.content == live_hosts_text
        assert hosts_file.read_text(encoding="utf-8") == live_hosts_text

    def test_validation_happens_before_io(self, tmp_path: Path, now: datetime) -> None:
        """Invalid requests fail before the file is even read."""
        with (
            patch("eha.core.runner.read_hosts") as mock_read,
            pytest.raises(ValidationError),
        ):
            run_request(tmp_path / "hosts", AddRequest(name="bad.com"), now)

        mock_read.assert_not_called()

    def test_invalid_ttl_leaves_file_untouched(
        self, hosts_file: Path, live_hosts_text: str, now: datetime
    ) -> None:
        """A TTL out of range aborts without changes."""
        with pytest.raises(ValidationError):
            run_request(hosts_file, AddRequest(name="a.local", ttl_minutes=525601), now)

        assert hosts_file.read_text(encoding="utf-8") == live_hosts_text

    def test_missing_file_raises(self, tmp_path: Path, now: datetime) -> None:
        """A missing hosts file is an I/O error."""
        with pytest.raises(HostsReadError):
            run_request(tmp_path / "missing", PruneRequest(), now)
