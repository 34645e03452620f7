from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Self

from ..exceptions import NoSourcePathError
from ..utils import split_flags
from .scalars import LanguageKind

if TYPE_CHECKING:
    from ..configuring.settings import Settings


@dataclass(frozen=True)
class CompileRequest:
    sources: tuple[Path, ...]
    language: LanguageKind
    output: Path
    extra_flags: tuple[str, ...] = ()
    debug_symbols: bool = False

    def __post_init__(self) -> None:
        if not self.sources:
            msg = "no source file to compile"
            raise NoSourcePathError(msg)

    @property
    def working_dir(self) -> Path:
        return self.sources[0].parent

    @classmethod
    def build(
        cls,
        sources: Sequence[Path],
        language: LanguageKind,
        settings: "Settings",
        debug_symbols: bool,
    ) -> Self:
        if not sources:
            msg = "no source file to compile"
            raise NoSourcePathError(msg)
        first = sources[0]
        return cls(
            sources=tuple(sources),
            language=language,
            output=settings.compiled_path(first.parent, first.stem),
            extra_flags=tuple(split_flags(settings.compiler_options_for(language))),
            debug_symbols=debug_symbols,
        )


@dataclass(frozen=True)
class CompileResult:
    exit_code: int
    diagnostic_text: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
