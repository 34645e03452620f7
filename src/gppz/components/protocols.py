from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..models import (
        CompileRequest,
        CompileResult,
        LanguageKind,
        NotificationLevel,
        OpenOptions,
    )


class EditorHostProtocol(Protocol):
    """Editor hosting the compile commands.

    The host owns documents, panes and notifications. gppz only asks it to save, open, \
    close and focus things, and to display messages.
    """

    def active_document(self) -> Path | None:
        """Path of the document being edited, None if there is none or it is unsaved."""

    def active_language(self) -> "LanguageKind | None":
        """Language already declared for the active document, if any."""

    def save_active_document(self) -> None: ...

    def open_document(self, path: Path, options: "OpenOptions | None" = None) -> None:
        """Open `path` and make it the active document.

        Args:
            path: Document to open. Opening an already open document only focuses it.
            options: Presentation options. Defaults are used if None.
        """

    def close_document(self, path: Path) -> None:
        """Close every tab showing `path`. Closing a document that isn't open is a no-op."""

    def focused_pane(self) -> Any: ...

    def focus_pane(self, pane: Any) -> None: ...

    def notify(self, level: "NotificationLevel", message: str) -> None: ...


class ProcessRunnerProtocol(Protocol):
    def run(self, args: Sequence[str], cwd: Path) -> "CompileResult": ...

    def spawn_detached(self, args: Sequence[str], cwd: Path) -> None: ...

    def spawn_shell(self, command: str, cwd: Path) -> None: ...


class FileTypeClassifierProtocol(Protocol):
    def classify(self, extension: str | None = None) -> "LanguageKind | None": ...


class RunLauncherProtocol(Protocol):
    def launch(
        self, compiled_path: Path, attach_debugger: bool, working_dir: Path
    ) -> None:
        """Start the compiled program without waiting for it.

        Args:
            compiled_path: Program to run.
            attach_debugger: Run the program under gdb.
            working_dir: Directory the program is started in.
        """


class CompileOrchestratorProtocol(Protocol):
    def compile(
        self, request: "CompileRequest", attach_debugger: bool
    ) -> "CompileResult": ...


class FactoryProtocol(Protocol):
    def process_runner(self) -> ProcessRunnerProtocol: ...

    def classifier(self) -> FileTypeClassifierProtocol: ...

    def run_launcher(self) -> RunLauncherProtocol: ...

    def compile_orchestrator(self) -> CompileOrchestratorProtocol: ...
