"""Shared test fixtures for Coding Police tests."""

import pytest

from coding_police.scanning import number_lines

_ENV_VARS = (
    "CODING_POLICE_MAX_FILE_LINES",
    "CODING_POLICE_MAX_FUNCTION_LINES",
    "CODING_POLICE_MIN_DUPLICATE_LINES",
    "CODING_POLICE_MAX_EXPORTS_PER_FILE",
    "CODING_POLICE_EXCLUDE_PATTERNS",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of every test.

    Points XDG_CONFIG_HOME at an empty directory, runs the test from an
    empty working directory, and clears CODING_POLICE_* variables.
    """
    xdg = tmp_path / "xdg"
    work = tmp_path / "work"
    xdg.mkdir()
    work.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    monkeypatch.chdir(work)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return work


@pytest.fixture
def work_dir(isolated_config):
    """The empty working directory the test runs in."""
    return isolated_config


@pytest.fixture
def global_config_file(tmp_path):
    """Path of the agentkit config file inside the isolated XDG directory."""
    path = tmp_path / "xdg" / "agentkit" / "config.toml"
    path.parent.mkdir(parents=True)
    return path


def generate_lines(count, template="const x = 1;"):
    """Distinct numbered lines: no duplicates, no function signatures."""
    return number_lines(f"{template} // line {i + 1}" for i in range(count))


@pytest.fixture
def long_function_lines():
    """A brace-style function opened at line 1 with 120 body lines, closed at 122."""
    body = [f"  const x{i} = {i};" for i in range(120)]
    return number_lines(["function longFunc() {", *body, "}"])


@pytest.fixture
def make_lines():
    """Factory for ``count`` distinct numbered lines."""
    return generate_lines
