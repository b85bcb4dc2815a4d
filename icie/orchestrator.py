"""Build and test orchestration for the active source file."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from icie.config import IcieConfig
from icie.hosts.base import EditorHost
from icie.invoker import ToolRunner, run_tool
from icie.models.context import ContextError
from icie.models.events import BuildPhase, ProgressEvent
from icie.models.result import BuildOutcome, ToolError
from icie.paths import (
    executable_path,
    resolve_source,
    resolve_test_directory,
    resolve_tool_path,
)
from icie.staleness import SourceNotFoundError, is_stale

log = logging.getLogger(__name__)

BUILD_TITLE = "ICIE Build"
TEST_TITLE = "ICIE Test"

PHASE_PROGRESS: dict[BuildPhase, tuple[int, str]] = {
    "saving-documents": (0, "Saving changes"),
    "compiling": (50, "Compiling"),
    "succeeded": (100, "Finished"),
    "failed": (100, "Failed"),
}


@dataclass(frozen=True, kw_only=True)
class BuildOrchestrator:
    """Saves open documents and compiles the active source file."""

    host: EditorHost
    config: IcieConfig = field(default_factory=IcieConfig)
    runner: ToolRunner = run_tool

    async def build(self, source: Path | None = None) -> BuildOutcome:
        """Build a source file, by default the active document.

        Failures are reported to the host and returned, never raised.

        Args:
            source: File to compile, read from the workspace context if None

        Returns:
            Outcome of the build run

        """
        if source is None:
            resolved = resolve_source(self.host.workspace_context())
            if isinstance(resolved, ContextError):
                log.error("Build aborted: %s", resolved.message)
                self.host.show_error(f"{BUILD_TITLE}: {resolved.message}")
                return BuildOutcome(status="aborted", error=resolved)
            source = resolved

        log.info("Building %s", source)
        self._enter("saving-documents")
        await self._save_all()

        self._enter("compiling")
        result = await self.runner(
            resolve_tool_path(self.config.tool_path), ["build", str(source)]
        )

        if isinstance(result, ToolError):
            log.error("Build of %s failed: %s", source, result.message)
            self._enter("failed")
            self.host.show_error(f"{BUILD_TITLE} failed")
            return BuildOutcome(status="failed", source=source, error=result)

        self._enter("succeeded")
        self.host.show_info(f"{BUILD_TITLE} finished")
        return BuildOutcome(status="succeeded", source=source)

    async def _save_all(self) -> None:
        """Save open documents, a failure here does not stop the build."""
        try:
            saved = await self.host.save_all()
        except Exception as e:
            log.warning("Saving documents failed, continuing: %s", e)
            return
        if not saved:
            log.warning("Some documents could not be saved, continuing")

    def _enter(self, phase: BuildPhase) -> None:
        percent, message = PHASE_PROGRESS[phase]
        self.host.report_progress(
            ProgressEvent(
                title=BUILD_TITLE, phase=phase, percent=percent, message=message
            )
        )


@dataclass(frozen=True, kw_only=True)
class TestOrchestrator:
    """Runs the test suite against the compiled active source file."""

    __test__ = False

    host: EditorHost
    builder: BuildOrchestrator
    config: IcieConfig = field(default_factory=IcieConfig)
    runner: ToolRunner = run_tool

    async def test(self) -> bool:
        """Ensure the executable is up to date, then run the tests.

        A rebuild is triggered when the executable is missing or older than
        the source. If that rebuild fails, the tests are not run.

        Returns:
            True if the tool reported no error

        """
        context = self.host.workspace_context()
        source = resolve_source(context)
        if isinstance(source, ContextError):
            return self._abort(source)
        executable = executable_path(source, self.config.executable_suffix)

        try:
            stale = await is_stale(source, executable)
        except SourceNotFoundError as e:
            log.error("Test aborted: %s", e)
            self.host.show_error(f"{TEST_TITLE}: source file not found")
            return False

        if stale:
            log.info("Executable %s is out of date, rebuilding", executable)
            outcome = await self.builder.build(source)
            if not outcome.succeeded:
                log.error("Test aborted: build %s", outcome.status)
                return False

        test_directory = resolve_test_directory(
            context, self.config.tests_directory
        )
        if isinstance(test_directory, ContextError):
            return self._abort(test_directory)

        result = await self.runner(
            resolve_tool_path(self.config.tool_path),
            ["test", str(executable), str(test_directory)],
        )

        if isinstance(result, ToolError):
            log.info("Tests of %s failed: %s", executable, result.message)
            return False

        log.info("Tests of %s passed", executable)
        return True

    def _abort(self, error: ContextError) -> bool:
        log.error("Test aborted: %s", error.message)
        self.host.show_error(f"{TEST_TITLE}: {error.message}")
        return False
