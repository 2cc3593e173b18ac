"""Tests for prefixsid.application.version module.

Tests version display functionality.
"""

from __future__ import annotations

import argparse
from io import StringIO
from unittest.mock import patch

from prefixsid.application.version import setargs, cmdline
from prefixsid.version import version


class TestSetargs:
    """Test the argument parser setup for version."""

    def test_setargs_creates_valid_parser(self) -> None:
        """setargs should create a valid argument parser (no extra args)."""
        parser = argparse.ArgumentParser()
        setargs(parser)

        args = parser.parse_args([])
        assert args is not None


class TestCmdline:
    """Test the cmdline function."""

    def test_cmdline_outputs_version(self) -> None:
        parser = argparse.ArgumentParser()
        setargs(parser)
        args = parser.parse_args([])

        with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
            result = cmdline(args)
            output = mock_stdout.getvalue()

        assert result == 0
        assert f'prefixsid : {version}' in output
        assert 'Python    :' in output
        assert 'Uname     :' in output
        assert 'From      :' in output
