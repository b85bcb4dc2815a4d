"""Commands exposed to the editor for one host session."""

import logging
from dataclasses import dataclass

from icie.config import IcieConfig
from icie.hosts.base import EditorHost
from icie.invoker import ToolRunner, run_tool
from icie.orchestrator import (
    BUILD_TITLE,
    TEST_TITLE,
    BuildOrchestrator,
    TestOrchestrator,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Session:
    """Orchestrators bound to one editor host.

    Created once per host session. Holds no per-run state, every command
    reads the workspace context afresh.
    """

    builder: BuildOrchestrator
    tester: TestOrchestrator

    @classmethod
    def create(
        cls,
        host: EditorHost,
        config: IcieConfig | None = None,
        runner: ToolRunner = run_tool,
    ) -> "Session":
        """Wire up the orchestrators for a host."""
        config = config or IcieConfig()
        builder = BuildOrchestrator(host=host, config=config, runner=runner)
        tester = TestOrchestrator(
            host=host, builder=builder, config=config, runner=runner
        )
        return cls(builder=builder, tester=tester)

    async def build(self) -> bool:
        """Run the build command, returns whether the build succeeded."""
        try:
            outcome = await self.builder.build()
        except Exception:
            log.exception("Unexpected error during build")
            self.builder.host.show_error(f"{BUILD_TITLE} failed")
            return False
        return outcome.succeeded

    async def test(self) -> bool:
        """Run the test command, returns whether all tests passed."""
        try:
            passed = await self.tester.test()
        except Exception:
            log.exception("Unexpected error during test")
            passed = False

        if passed:
            self.tester.host.show_info(f"{TEST_TITLE} passed")
        else:
            self.tester.host.show_error(f"{TEST_TITLE} failed")
        return passed
