from typing import TYPE_CHECKING

from ..models import Platform
from .protocols import (
    CompileOrchestratorProtocol,
    EditorHostProtocol,
    FactoryProtocol,
    FileTypeClassifierProtocol,
    ProcessRunnerProtocol,
    RunLauncherProtocol,
)

if TYPE_CHECKING:
    from ..configuring.settings import Settings


class SettingsFactory(FactoryProtocol):
    def __init__(
        self,
        settings: "Settings",
        editor: EditorHostProtocol,
        platform: Platform | None = None,
    ) -> None:
        self._settings = settings
        self._editor = editor
        self._platform = platform or Platform.current()

    def process_runner(self) -> ProcessRunnerProtocol:
        from .process_runner import ProcessRunner

        return ProcessRunner()

    def classifier(self) -> FileTypeClassifierProtocol:
        from .classifier import FileTypeClassifier

        return FileTypeClassifier(grammars=self._settings.grammars, editor=self._editor)

    def run_launcher(self) -> RunLauncherProtocol:
        from .launcher import launcher_for

        return launcher_for(
            self._platform,
            runner=self.process_runner(),
            terminal=self._settings.linux_terminal,
        )

    def compile_orchestrator(self) -> CompileOrchestratorProtocol:
        from .orchestrator import CompileOrchestrator

        return CompileOrchestrator(
            settings=self._settings,
            editor=self._editor,
            runner=self.process_runner(),
            launcher=self.run_launcher(),
        )
