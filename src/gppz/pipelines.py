from collections.abc import Sequence
from logging import DEBUG, getLogger
from pathlib import Path

from rich.console import Console

from . import app_name
from .components.editor import ConsoleEditorHost
from .components.factory import SettingsFactory
from .configuring.settings import Settings
from .exceptions import (
    GppzError,
    NoActiveDocumentError,
    NoSourcePathError,
    UnknownLanguageError,
)
from .models import CompileRequest, CompileResult, LanguageKind, NotificationLevel

_logger = getLogger(__name__)


def _setup_verbosity(settings: Settings) -> None:
    if settings.debug:
        getLogger(app_name).setLevel(DEBUG)


def compile_active(
    document: Path | None,
    attach_debugger: bool,
    language: LanguageKind | None = None,
    console: Console | None = None,
) -> CompileResult | None:
    """Compile the active document, then run it if configured to.

    Args:
        document: Document being edited. None or a path to a missing file means that \
            there is no saved document to compile.
        attach_debugger: Compile with debug symbols and run the program under gdb.
        language: Language declared for the document. Deduced from its extension if \
            None.
        console: Console used to display notifications and documents.

    Returns:
        The compilation result, None if nothing was compiled.
    """
    settings = Settings.from_yaml(document.parent if document else Path())
    _setup_verbosity(settings)
    editor = ConsoleEditorHost(
        settings.grammars,
        active_document=document,
        language=language,
        console=console,
    )
    factory = SettingsFactory(settings, editor)
    try:
        path = editor.active_document()
        if path is None:
            msg = "File not found. Save before compiling."
            raise NoActiveDocumentError(msg)
        kind = factory.classifier().classify()
        if kind is None:
            msg = f"{path.name} is neither a C nor a C++ file"
            raise UnknownLanguageError(msg)
        return factory.compile_orchestrator().compile(
            CompileRequest.build([path], kind, settings, attach_debugger),
            attach_debugger,
        )
    except GppzError as e:
        editor.notify(NotificationLevel.Error, f"Error: {e}")
        return None


def compile_paths(
    paths: Sequence[Path],
    attach_debugger: bool,
    console: Console | None = None,
) -> CompileResult | None:
    """Compile several files together, as selected in a file browser.

    Args:
        paths: Files to compile. The first one is the file the command was invoked \
            on: its extension decides the language, its directory is the working \
            directory and its name is used for the compiled program.
        attach_debugger: Compile with debug symbols and run the program under gdb.
        console: Console used to display notifications and documents.

    Returns:
        The compilation result, None if nothing was compiled.
    """
    settings = Settings.from_yaml(paths[0].parent if paths else Path())
    _setup_verbosity(settings)
    editor = ConsoleEditorHost(settings.grammars, console=console)
    factory = SettingsFactory(settings, editor)
    try:
        if not paths:
            msg = "no file selected"
            raise NoSourcePathError(msg)
        sources = [path.resolve() for path in paths]
        kind = factory.classifier().classify(sources[0].suffix)
        if kind is None:
            msg = f"{sources[0].name} is neither a C nor a C++ file"
            raise UnknownLanguageError(msg)
        _logger.debug("Compiling %s as %s", sources, kind.value)
        return factory.compile_orchestrator().compile(
            CompileRequest.build(sources, kind, settings, attach_debugger),
            attach_debugger,
        )
    except GppzError as e:
        editor.notify(NotificationLevel.Error, f"Error: {e}")
        return None
