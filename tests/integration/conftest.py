"""Fixtures for integration tests."""

import stat
from pathlib import Path
from typing import Protocol

import pytest


class ToolFn(Protocol):
    """Protocol for fake tool creation function."""

    def __call__(self, script: str) -> Path:
        """Write an executable shell script and return its path."""


@pytest.fixture
def make_tool(tmp_path: Path) -> ToolFn:
    """Return a function to create fake compiler-driver executables."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def _make(script: str) -> Path:
        tool = bin_dir / "ci"
        tool.write_text(f"#!/bin/sh\n{script}\n")
        tool.chmod(tool.stat().st_mode | stat.S_IXUSR)
        return tool

    return _make


@pytest.fixture
def calls_log(tmp_path: Path) -> Path:
    """File the fake tool appends its arguments to."""
    return tmp_path / "calls.log"


@pytest.fixture
def recording_tool(make_tool: ToolFn, calls_log: Path) -> Path:
    """Fake ci that records calls and produces the executable on build.

    Exits with the status in $CI_BUILD_STATUS or $CI_TEST_STATUS.
    """
    return make_tool(
        f"""echo "$@" >> {calls_log}
case "$1" in
  build)
    [ "${{CI_BUILD_STATUS:-0}}" = 0 ] && touch "${{2%.*}}.e"
    exit "${{CI_BUILD_STATUS:-0}}" ;;
  test)
    exit "${{CI_TEST_STATUS:-0}}" ;;
esac
exit 64"""
    )


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Workspace with a single source file."""
    root = tmp_path / "workspace"
    root.mkdir()
    (root / "main.src").write_text("int main() {}\n")
    return root
