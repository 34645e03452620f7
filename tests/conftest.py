from collections.abc import Sequence
from io import StringIO
from pathlib import Path
from typing import Any

from pytest import MonkeyPatch, fixture
from rich.console import Console

from gppz.configuring import settings as settings_module
from gppz.models import (
    CompileResult,
    LanguageKind,
    NotificationLevel,
    OpenOptions,
)


class FakeRunner:
    def __init__(self, result: CompileResult | None = None) -> None:
        self.result = result or CompileResult(0, "")
        self.runs: list[tuple[list[str], Path]] = []
        self.detached: list[tuple[list[str], Path]] = []
        self.shell: list[tuple[str, Path]] = []

    def run(self, args: Sequence[str], cwd: Path) -> CompileResult:
        self.runs.append((list(args), cwd))
        return self.result

    def spawn_detached(self, args: Sequence[str], cwd: Path) -> None:
        self.detached.append((list(args), cwd))

    def spawn_shell(self, command: str, cwd: Path) -> None:
        self.shell.append((command, cwd))


class FakeLauncher:
    def __init__(self) -> None:
        self.launches: list[tuple[Path, bool, Path]] = []

    def launch(
        self, compiled_path: Path, attach_debugger: bool, working_dir: Path
    ) -> None:
        self.launches.append((compiled_path, attach_debugger, working_dir))


class FakeEditorHost:
    def __init__(
        self, active: Path | None = None, language: LanguageKind | None = None
    ) -> None:
        self.active = active
        self.language = language
        self.saved = 0
        self.documents: list[Path] = []
        self.opened: list[tuple[Path, OpenOptions | None]] = []
        self.notifications: list[tuple[NotificationLevel, str]] = []
        self.focused: list[Any] = []

    def active_document(self) -> Path | None:
        return self.active

    def active_language(self) -> LanguageKind | None:
        return self.language

    def save_active_document(self) -> None:
        self.saved += 1

    def open_document(self, path: Path, options: OpenOptions | None = None) -> None:
        self.opened.append((path, options))
        if path not in self.documents:
            self.documents.append(path)

    def close_document(self, path: Path) -> None:
        self.documents = [d for d in self.documents if d != path]

    def focused_pane(self) -> str:
        return "main-pane"

    def focus_pane(self, pane: Any) -> None:
        self.focused.append(pane)

    def notify(self, level: NotificationLevel, message: str) -> None:
        self.notifications.append((level, message))


@fixture
def console() -> Console:
    return Console(file=StringIO(), width=120)


@fixture
def user_config_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr(settings_module, "user_config_dir", lambda _: str(config_dir))
    return config_dir


@fixture
def project_dir(tmp_path: Path, user_config_dir: Path) -> Path:
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    return project_dir
