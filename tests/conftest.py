"""pytest configuration shared by every prefixsid test.

Each test starts from a fresh configuration and a silent logger.
"""

import sys
from typing import Any, Iterator

import pytest

from prefixsid.environment import Environment
from prefixsid.logger.option import echo, option


@pytest.fixture(autouse=True)
def fresh_environment() -> Iterator[None]:
    """Forget any configuration loaded by a previous test."""
    Environment.reset()
    yield
    Environment.reset()


@pytest.fixture(autouse=True)
def silent_logger() -> Iterator[None]:
    """Restore the logger options a test may have changed."""
    saved: dict[str, Any] = {
        'logger': option.logger,
        'formater': option.formater,
        'logit': dict(option.logit),
        'enabled': dict(option.enabled),
        'short': option.short,
        'level': option.level,
        'destination': option.destination,
    }
    option.logger = None
    option.formater = echo
    yield
    for name, value in saved.items():
        setattr(option, name, value)


@pytest.fixture(autouse=True)
def default_excepthook(monkeypatch: pytest.MonkeyPatch) -> None:
    """Undo the crash report hook installed by the command line."""
    monkeypatch.setattr(sys, 'excepthook', sys.excepthook)
    monkeypatch.setenv('PDB', '0')
