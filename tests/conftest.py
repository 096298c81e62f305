"""Shared pytest fixtures and test helpers for bugintake tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from bugintake.config.settings import BugintakeSettings
from bugintake.services.intake import IntakeService

FULL_REPORT = """\
## Describe the bug

The sync command crashes when the config file is missing.

## Affected version

1.4.2
Python version: 3.12.1

## Operating System

Arch Linux, kernel 6.8

## To Reproduce

1. open app
2. click X
3. crash

## Expected behavior

A helpful error message instead of a traceback.

## Logs and outputs

```
Traceback (most recent call last):
  File "main.py", line 3, in <module>
KeyError: 'config'
```
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory with no config file, set as CWD."""
    monkeypatch.delenv("BUGINTAKE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> BugintakeSettings:
    return BugintakeSettings.from_cli(project_root=project_root)


@pytest.fixture
def service(settings: BugintakeSettings) -> IntakeService:
    return IntakeService(settings)


@pytest.fixture
def full_report() -> str:
    """A well-formed report with all six sections filled in."""
    return FULL_REPORT


@pytest.fixture
def report_file(project_root: Path) -> Path:
    path = project_root / "report.md"
    path.write_text(FULL_REPORT, encoding="utf-8")
    return path
