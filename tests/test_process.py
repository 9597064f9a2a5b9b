"""Tests for the process liveness check."""

import subprocess
from unittest.mock import MagicMock, patch

from ncspot_remote.process import is_process_running


class TestIsProcessRunning:
    """Tests for is_process_running()."""

    def test_match_found(self):
        with patch(
            "ncspot_remote.process.subprocess.run",
            return_value=MagicMock(returncode=0),
        ) as run:
            assert is_process_running("ncspot") is True

        assert run.call_args.args[0] == ["pgrep", "-x", "ncspot"]

    def test_no_match(self):
        with patch(
            "ncspot_remote.process.subprocess.run",
            return_value=MagicMock(returncode=1),
        ):
            assert is_process_running("ncspot") is False

    def test_pgrep_missing(self):
        with patch(
            "ncspot_remote.process.subprocess.run", side_effect=FileNotFoundError
        ):
            assert is_process_running("ncspot") is False

    def test_subprocess_error(self):
        with patch(
            "ncspot_remote.process.subprocess.run",
            side_effect=subprocess.SubprocessError("boom"),
        ):
            assert is_process_running("ncspot") is False
