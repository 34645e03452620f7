from collections.abc import Mapping, Sequence
from logging import getLogger
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..models import LanguageKind, NotificationLevel, OpenOptions
from .classifier import language_for_extension
from .protocols import EditorHostProtocol

_logger = getLogger(__name__)

_styles = {
    NotificationLevel.Error: "red",
    NotificationLevel.Warning: "yellow",
    NotificationLevel.Success: "green",
}


class ConsoleEditorHost(EditorHostProtocol):
    """Editor host for the command line.

    A terminal has a single pane. The active document is the file given on the \
    command line and it is always saved since it is read from disk. Read-only \
    documents and notifications are rendered with rich.
    """

    def __init__(
        self,
        grammars: Mapping[LanguageKind, Sequence[str]],
        active_document: Path | None = None,
        language: LanguageKind | None = None,
        console: Console | None = None,
    ) -> None:
        self._grammars = grammars
        self._active_document = active_document
        self._language = language
        self._console = console or Console(stderr=True)
        self.documents: list[Path] = []
        self.notifications: list[tuple[NotificationLevel, str]] = []

    def active_document(self) -> Path | None:
        if self._active_document is None or not self._active_document.is_file():
            return None
        return self._active_document.resolve()

    def active_language(self) -> LanguageKind | None:
        if self._language is not None:
            return self._language
        document = self.active_document()
        if document is None:
            return None
        return language_for_extension(self._grammars, document.suffix)

    def save_active_document(self) -> None:
        _logger.debug("%s is read from disk, nothing to save", self._active_document)

    def open_document(self, path: Path, options: OpenOptions | None = None) -> None:
        options = options or OpenOptions()
        if path not in self.documents:
            self.documents.append(path)
        self._active_document = path
        if options.read_only:
            self._console.print(
                Panel(
                    Text(
                        path.read_text(encoding="utf8"),
                        no_wrap=not options.soft_wrapped,
                    ),
                    title=str(path),
                    subtitle="read-only",
                )
            )

    def close_document(self, path: Path) -> None:
        self.documents = [document for document in self.documents if document != path]

    def focused_pane(self) -> Console:
        return self._console

    def focus_pane(self, pane: Console) -> None:
        _logger.debug("Focusing %s", pane)

    def notify(self, level: NotificationLevel, message: str) -> None:
        self.notifications.append((level, message))
        style = _styles[level]
        self._console.print(
            Panel(Text(message), title=level.value.capitalize(), border_style=style)
        )
