from pathlib import Path

from ..models import LanguageKind
from . import app


@app.command()
def compile(  # noqa: A001
    file: Path,
    /,
    *,
    language: LanguageKind | None = None,
) -> None:
    """Compile FILE, then run it if configured to.

    Args:
        file: File to compile
        language: Language of FILE, deduced from its extension by default

    """
    from ..pipelines import compile_active

    result = compile_active(file, attach_debugger=False, language=language)
    if result is None or not result.ok:
        raise SystemExit(1)


@app.command()
def gdb(
    file: Path,
    /,
    *,
    language: LanguageKind | None = None,
) -> None:
    """Compile FILE with debug symbols, then run it under gdb if configured to.

    Args:
        file: File to compile
        language: Language of FILE, deduced from its extension by default

    """
    from ..pipelines import compile_active

    result = compile_active(file, attach_debugger=True, language=language)
    if result is None or not result.ok:
        raise SystemExit(1)
