from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..models import (
    CompileRequest,
    CompileResult,
    NotificationLevel,
    OpenOptions,
)
from .protocols import (
    CompileOrchestratorProtocol,
    EditorHostProtocol,
    ProcessRunnerProtocol,
    RunLauncherProtocol,
)

if TYPE_CHECKING:
    from ..configuring.settings import Settings

diagnostics_filename = "compiling_error.txt"


def diagnostics_path(directory: Path) -> Path:
    return directory / diagnostics_filename


def build_args(request: CompileRequest) -> list[str]:
    """Assemble the compiler arguments for a request.

    Args:
        request: Compilation to perform.

    Returns:
        Debug flag if debug symbols were requested, then the sources in order, then \
        `-o` and the output path, then the extra flags.
    """
    return [
        *(["-g"] if request.debug_symbols else []),
        *(str(source) for source in request.sources),
        "-o",
        str(request.output),
        *request.extra_flags,
    ]


class CompileOrchestrator(CompileOrchestratorProtocol):
    def __init__(
        self,
        settings: "Settings",
        editor: EditorHostProtocol,
        runner: ProcessRunnerProtocol,
        launcher: RunLauncherProtocol,
    ) -> None:
        self._settings = settings
        self._editor = editor
        self._runner = runner
        self._launcher = launcher
        self._logger = getLogger(__name__)

    def compile(self, request: CompileRequest, attach_debugger: bool) -> CompileResult:
        active_pane = self._editor.focused_pane()
        if self._editor.active_document() is not None:
            self._editor.save_active_document()
        command = self._settings.compiler_for(request.language)
        args = build_args(request)
        self._logger.debug("compiler args %s", args)
        result = self._runner.run([command, *args], request.working_dir)
        if result.ok:
            self._on_success(request, result, attach_debugger, active_pane)
        else:
            self._on_failure(request, result, active_pane)
        return result

    def _on_failure(
        self, request: CompileRequest, result: CompileResult, active_pane: Any
    ) -> None:
        if self._settings.show_error_notifications:
            self._editor.notify(NotificationLevel.Error, result.diagnostic_text)
        if not self._settings.add_compiling_error:
            return
        path = diagnostics_path(request.working_dir)
        try:
            path.write_text(result.diagnostic_text, encoding="utf8", newline="")
            self._logger.debug("%s has been written successfully", path)
            self._editor.open_document(
                path,
                OpenOptions(
                    split=self._settings.split_direction,
                    read_only=True,
                    soft_tabs=False,
                    soft_wrapped=True,
                ),
            )
            self._editor.focus_pane(active_pane)
        except OSError as e:
            self._logger.warning("Error writing %s: %s", path, e)

    def _on_success(
        self,
        request: CompileRequest,
        result: CompileResult,
        attach_debugger: bool,
        active_pane: Any,
    ) -> None:
        if result.diagnostic_text and self._settings.show_warnings:
            self._editor.notify(NotificationLevel.Warning, result.diagnostic_text)
        path = diagnostics_path(request.working_dir)
        if self._settings.close_error_tab_on_success:
            self._editor.close_document(path)
        try:
            path.unlink(missing_ok=True)
            self._logger.debug("%s has been deleted if it existed", path)
        except OSError as e:
            self._logger.debug("Error deleting %s: %s", path, e)
        self._editor.open_document(request.sources[0])
        self._editor.focus_pane(active_pane)
        if not self._settings.run_after_compile:
            self._editor.notify(NotificationLevel.Success, "Compilation Successful")
            return
        try:
            self._launcher.launch(request.output, attach_debugger, request.working_dir)
        except OSError as e:
            self._logger.warning("Could not run %s: %s", request.output, e)
