"""Shared fixtures for the whip test suite."""

from pathlib import Path
from textwrap import dedent

import pytest


SAMPLE_SCHEDULE = dedent(
    """\
    - name: Health
      subs:
        - name: Stretch
          when: daily
        - name: Long run
          when: weekly sat
    - name: Home
      subs:
        - name: Pay rent
          when: monthly last
        - name: Decorate
          when: yearly 12-01
    """
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config and .whip.env lookups away from the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("WHIP_CONFIG", str(home / ".whip_config"))
    return home


@pytest.fixture
def schedule_file(tmp_path) -> Path:
    path = tmp_path / "schedule.yaml"
    path.write_text(SAMPLE_SCHEDULE, encoding="utf-8")
    return path


@pytest.fixture
def log_format(tmp_path) -> str:
    return str(tmp_path / "logs" / "%Y" / "%Y-%m-%d.md")
