"""Tests for prefixsid.application.main module.

Tests CLI argument parsing and subcommand dispatch.
"""

from __future__ import annotations

import json
from io import StringIO
from unittest.mock import patch

import pytest

from prefixsid.application.main import main


class TestMainFunction:
    """Test the main() entry point."""

    def test_main_no_args_shows_help(self) -> None:
        """Running with no args should show help and return 1."""
        with patch('sys.argv', ['prefixsid']):
            with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
                result = main()

        assert result == 1
        assert 'Environment values are:' in mock_stdout.getvalue()

    def test_main_version_subcommand(self) -> None:
        with patch('sys.argv', ['prefixsid', 'version']):
            with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
                result = main()
                output = mock_stdout.getvalue()

        assert result == 0
        assert 'prefixsid :' in output

    def test_main_env_subcommand(self) -> None:
        with patch('sys.argv', ['prefixsid', 'env', '--env']):
            with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
                result = main()

        assert result == 0
        assert 'prefixsid.decode.siblings=' in mock_stdout.getvalue()

    def test_main_decode_subcommand(self) -> None:
        with patch('sys.argv', ['prefixsid', 'decode', '01000700000000000064']):
            with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
                result = main()

        assert result == 0
        assert json.loads(mock_stdout.getvalue()) == {'label_index': {'flags': 0, 'label_index': 100}}

    def test_main_help_flag(self) -> None:
        with patch('sys.argv', ['prefixsid', '--help']):
            with patch('sys.stdout', new_callable=StringIO):
                with pytest.raises(SystemExit) as exc_info:
                    main()

        assert exc_info.value.code == 0

    def test_main_unknown_subcommand(self) -> None:
        with patch('sys.argv', ['prefixsid', 'encode']):
            with patch('sys.stderr', new_callable=StringIO):
                with pytest.raises(SystemExit) as exc_info:
                    main()

        assert exc_info.value.code == 2
