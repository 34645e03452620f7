from pathlib import Path

from pytest import mark

from gppz.components.classifier import FileTypeClassifier, language_for_extension
from gppz.configuring.settings import Settings
from gppz.models import LanguageKind

from .conftest import FakeEditorHost

grammars = Settings().grammars


@mark.parametrize(
    ("extension", "expected"),
    [
        (".c", LanguageKind.C),
        (".h", LanguageKind.C),
        (".cpp", LanguageKind.Cpp),
        (".cc", LanguageKind.Cpp),
        (".hpp", LanguageKind.Cpp),
        (".C", LanguageKind.Cpp),
        (".py", None),
        ("cpp", None),
    ],
)
def test_language_for_extension(extension: str, expected: LanguageKind | None) -> None:
    assert language_for_extension(grammars, extension) is expected


def test_first_grammar_wins() -> None:
    overlapping = {LanguageKind.Cpp: ("h",), LanguageKind.C: ("h",)}

    assert language_for_extension(overlapping, ".h") is LanguageKind.Cpp


def test_extension_ignores_editor(tmp_path: Path) -> None:
    editor = FakeEditorHost(active=tmp_path / "a.c", language=LanguageKind.C)

    assert FileTypeClassifier(grammars, editor).classify(".cpp") is LanguageKind.Cpp


def test_no_extension_asks_editor(tmp_path: Path) -> None:
    editor = FakeEditorHost(active=tmp_path / "a.txt", language=LanguageKind.Cpp)

    assert FileTypeClassifier(grammars, editor).classify() is LanguageKind.Cpp


def test_no_extension_without_document() -> None:
    editor = FakeEditorHost(language=LanguageKind.C)

    assert FileTypeClassifier(grammars, editor).classify() is None
