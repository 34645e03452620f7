from pathlib import Path

from . import app


@app.command()
def tree_compile(files: list[Path], /) -> None:
    """Compile FILES together into a program named after the first one.

    Args:
        files: Files to compile. The first one decides the language and the \
            working directory

    """
    from ..pipelines import compile_paths

    result = compile_paths(files, attach_debugger=False)
    if result is None or not result.ok:
        raise SystemExit(1)


@app.command()
def tree_gdb(files: list[Path], /) -> None:
    """Compile FILES together with debug symbols, then run the program under gdb.

    Args:
        files: Files to compile. The first one decides the language and the \
            working directory

    """
    from ..pipelines import compile_paths

    result = compile_paths(files, attach_debugger=True)
    if result is None or not result.ok:
        raise SystemExit(1)
