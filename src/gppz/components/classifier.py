from collections.abc import Mapping, Sequence

from ..models import LanguageKind
from .protocols import EditorHostProtocol, FileTypeClassifierProtocol


def language_for_extension(
    grammars: Mapping[LanguageKind, Sequence[str]], extension: str
) -> LanguageKind | None:
    """Find the first language whose grammar lists `extension`.

    Args:
        grammars: Known file extensions, without the leading dot, for each language. \
            Languages are scanned in mapping order.
        extension: Extension to look for, with its leading dot (e.g. `.cpp`).

    Returns:
        The matching language, None if no grammar lists the extension.
    """
    for language, file_types in grammars.items():
        for file_type in file_types:
            if extension == f".{file_type}":
                return language
    return None


class FileTypeClassifier(FileTypeClassifierProtocol):
    def __init__(
        self,
        grammars: Mapping[LanguageKind, Sequence[str]],
        editor: EditorHostProtocol,
    ) -> None:
        self._grammars = grammars
        self._editor = editor

    def classify(self, extension: str | None = None) -> LanguageKind | None:
        if extension:
            return language_for_extension(self._grammars, extension)
        if self._editor.active_document() is None:
            return None
        return self._editor.active_language()
