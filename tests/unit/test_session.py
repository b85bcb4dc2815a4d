"""Tests for session commands."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from icie.config import IcieConfig
from icie.models.context import WorkspaceContext
from icie.orchestrator import BuildOrchestrator, TestOrchestrator
from icie.session import Session
from icie.testing.factories import ToolErrorFactory, ToolOutputFactory
from icie.testing.host import RecordingHost


@pytest.fixture
def host(tmp_path: Path) -> RecordingHost:
    """Host with an existing active document."""
    (tmp_path / "main.cpp").write_text("")
    return RecordingHost(
        context=WorkspaceContext(
            active_document=tmp_path / "main.cpp", workspace_root=tmp_path
        )
    )


def test_create_shares_host_and_config(host: RecordingHost) -> None:
    """Wires both orchestrators to the same host, config and runner."""
    config = IcieConfig(tests_directory="tests")
    runner = AsyncMock()

    session = Session.create(host, config, runner=runner)

    assert session.builder.host is host
    assert session.tester.host is host
    assert session.tester.builder is session.builder
    assert session.builder.config is config
    assert session.tester.runner is runner


def test_create_uses_default_config(host: RecordingHost) -> None:
    """Falls back to the default configuration."""
    session = Session.create(host)

    assert session.builder.config == IcieConfig()


async def test_build_returns_success(host: RecordingHost) -> None:
    """Returns True when the build succeeds."""
    runner = AsyncMock(return_value=ToolOutputFactory.build())
    session = Session.create(host, runner=runner)

    assert await session.build() is True


async def test_build_returns_failure(host: RecordingHost) -> None:
    """Returns False when the build fails."""
    runner = AsyncMock(return_value=ToolErrorFactory.build())
    session = Session.create(host, runner=runner)

    assert await session.build() is False


async def test_build_does_not_raise(host: RecordingHost) -> None:
    """Reports unexpected errors instead of raising them."""
    session = Session.create(host)

    with patch.object(
        BuildOrchestrator,
        "build",
        new_callable=AsyncMock,
        side_effect=RuntimeError("boom"),
    ):
        assert await session.build() is False

    assert host.errors == ["ICIE Build failed"]


async def test_test_notifies_success(host: RecordingHost) -> None:
    """Shows a message when the tests pass."""
    runner = AsyncMock(return_value=ToolOutputFactory.build())
    session = Session.create(host, runner=runner)

    assert await session.test() is True

    assert host.notifications[-1].level == "info"
    assert host.notifications[-1].message == "ICIE Test passed"


async def test_test_notifies_failure(host: RecordingHost) -> None:
    """Shows an error when the tests fail."""
    session = Session.create(host)

    with patch.object(
        TestOrchestrator, "test", new_callable=AsyncMock, return_value=False
    ):
        assert await session.test() is False

    assert host.errors == ["ICIE Test failed"]


async def test_test_does_not_raise(host: RecordingHost) -> None:
    """Reports unexpected errors instead of raising them."""
    session = Session.create(host)

    with patch.object(
        TestOrchestrator,
        "test",
        new_callable=AsyncMock,
        side_effect=RuntimeError("boom"),
    ):
        assert await session.test() is False

    assert host.errors == ["ICIE Test failed"]


async def test_commands_read_context_on_every_run(tmp_path: Path) -> None:
    """Builds whichever document is active when the command runs."""
    runner = AsyncMock(return_value=ToolOutputFactory.build())
    documents = [tmp_path / "a.cpp", tmp_path / "b.cpp"]

    class SwitchingHost(RecordingHost):
        """Host whose active document changes after each save."""

        def workspace_context(self) -> WorkspaceContext:
            document = documents[len(self.save_calls)]
            return WorkspaceContext(active_document=document)

    host = SwitchingHost()
    session = Session.create(host, runner=runner)

    await session.build()
    await session.build()

    built = [c.args[1][1] for c in runner.await_args_list]
    assert built == [str(tmp_path / "a.cpp"), str(tmp_path / "b.cpp")]
