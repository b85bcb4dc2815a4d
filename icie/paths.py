"""Derivation of artifact, tool and test directory paths."""

from pathlib import Path

from icie.models.context import ContextError, WorkspaceContext

DEFAULT_TOOL_SUBPATH = Path(".cargo") / "bin" / "ci"
DEFAULT_EXECUTABLE_SUFFIX = ".e"


def executable_path(source: Path, suffix: str = DEFAULT_EXECUTABLE_SUFFIX) -> Path:
    """Derive the compiled artifact path from a source path.

    The source extension is replaced, so ``/w/main.cpp`` becomes ``/w/main.e``.
    """
    return source.with_suffix(suffix)


def resolve_source(context: WorkspaceContext) -> Path | ContextError:
    """Return the active document path, or an error when there is none."""
    if context.active_document is None:
        return ContextError(kind="no-active-document")
    return context.active_document


def resolve_test_directory(
    context: WorkspaceContext, tests_directory: str | None = None
) -> Path | ContextError:
    """Return the directory holding the test cases.

    Args:
        context: Current workspace context
        tests_directory: Optional subdirectory of the workspace root

    Returns:
        The test directory, or an error when no workspace root is open.

    """
    if context.workspace_root is None:
        return ContextError(kind="no-workspace-root")
    if tests_directory:
        return context.workspace_root / tests_directory
    return context.workspace_root


def resolve_tool_path(configured: Path | None = None) -> Path:
    """Return the compiler-driver location."""
    if configured is not None:
        return configured.expanduser()
    return Path.home() / DEFAULT_TOOL_SUBPATH
