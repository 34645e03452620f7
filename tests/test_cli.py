import sys
from logging import DEBUG, NOTSET, getLogger
from pathlib import Path
from unittest.mock import patch

from pytest import LogCaptureFixture, fixture, mark, raises

from gppz.cli import main
from gppz.components.orchestrator import diagnostics_path

posix_only = mark.skipif(sys.platform == "win32", reason="uses a POSIX shell stub")


@fixture
def working_dir(project_dir: Path) -> Path:
    (project_dir / "gppz.yml").write_text(
        "run_after_compile: false\n"
        "compile_to_tmp_directory: false\n"
        f"c_compiler: {project_dir / 'stub-cc'}\n"
        f"cpp_compiler: {project_dir / 'stub-cc'}\n",
        encoding="utf8",
    )
    return project_dir


def _write_compiler(working_dir: Path, body: str) -> None:
    stub = working_dir / "stub-cc"
    stub.write_text(f"#!/bin/sh\n{body}\n", encoding="utf8")
    stub.chmod(0o755)


def run_gppz(*args: str) -> None:
    with patch("sys.argv", ["gppz", *args]):
        try:
            main()
        except SystemExit as e:
            if e.code:
                raise e


@posix_only
def test_compile(working_dir: Path) -> None:
    _write_compiler(working_dir, 'echo "$@" > args.txt')
    source = working_dir / "main.cpp"
    source.write_text("int main() {}\n", encoding="utf8")

    run_gppz("compile", str(source))

    args = (working_dir / "args.txt").read_text(encoding="utf8").split()
    assert args == [str(source.resolve()), "-o", str((working_dir / "main").resolve())]
    assert not diagnostics_path(working_dir).exists()


@posix_only
def test_gdb(working_dir: Path) -> None:
    _write_compiler(working_dir, 'echo "$@" > args.txt')
    source = working_dir / "main.c"
    source.write_text("int main() {}\n", encoding="utf8")

    run_gppz("gdb", str(source))

    args = (working_dir / "args.txt").read_text(encoding="utf8").split()
    assert args[0] == "-g"


@posix_only
def test_compile_error(working_dir: Path) -> None:
    _write_compiler(working_dir, 'printf "error: x undeclared" >&2\nexit 1')
    source = working_dir / "broken.c"
    source.write_text("int main() { return x; }\n", encoding="utf8")

    with raises(SystemExit):
        run_gppz("compile", str(source))

    assert diagnostics_path(working_dir).read_text(encoding="utf8") == (
        "error: x undeclared"
    )

    _write_compiler(working_dir, "exit 0")
    run_gppz("compile", str(source))

    assert not diagnostics_path(working_dir).exists()


@posix_only
def test_tree_compile(working_dir: Path) -> None:
    _write_compiler(working_dir, 'echo "$@" > args.txt')
    sources = [working_dir / "main.c", working_dir / "util.c"]
    for source in sources:
        source.touch()

    run_gppz("tree-compile", *map(str, sources))

    args = (working_dir / "args.txt").read_text(encoding="utf8").split()
    assert args == [
        *(str(source.resolve()) for source in sources),
        "-o",
        str((working_dir / "main").resolve()),
    ]


def test_compile_missing_file(working_dir: Path) -> None:
    with raises(SystemExit):
        run_gppz("compile", str(working_dir / "missing.c"))


def test_compile_unknown_language(working_dir: Path) -> None:
    source = working_dir / "notes.txt"
    source.touch()

    with raises(SystemExit):
        run_gppz("compile", str(source))


def test_print_settings(working_dir: Path) -> None:
    run_gppz("print-settings", "--workdir", str(working_dir))


@posix_only
def test_debug_setting_enables_verbose_logging(
    working_dir: Path, caplog: LogCaptureFixture
) -> None:
    with (working_dir / "gppz.yml").open("a", encoding="utf8") as fh:
        fh.write("debug: true\n")
    _write_compiler(working_dir, "exit 0")
    source = working_dir / "main.c"
    source.touch()
    logger = getLogger("gppz")
    try:
        with caplog.at_level(DEBUG):
            run_gppz("compile", str(source))
        assert logger.level == DEBUG
    finally:
        logger.setLevel(NOTSET)
    assert any(
        record.name.startswith("gppz") and record.levelno == DEBUG
        for record in caplog.records
    )
