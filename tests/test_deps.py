"""Unit tests for external tool lookups"""

from unittest.mock import patch
import os
import sys

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.deps import check_command_exists, get_missing_commands


class TestDeps:
    @patch("utils.deps.shutil.which")
    def test_check_command_exists(self, mock_which):
        mock_which.side_effect = lambda cmd: "/usr/bin/pass" if cmd == "pass" else None

        assert check_command_exists("pass")
        assert not check_command_exists("wtype")

    @patch("utils.deps.shutil.which")
    def test_missing_commands_keep_order(self, mock_which):
        mock_which.side_effect = lambda cmd: None if cmd != "pass" else "/usr/bin/pass"

        assert get_missing_commands(["wtype", "pass", "xdotool"]) == ["wtype", "xdotool"]
