from collections.abc import Sequence
from logging import getLogger
from pathlib import Path
from subprocess import DEVNULL, PIPE, Popen

from ..exceptions import CompilerNotFoundError, WorkingDirectoryNotFoundError
from ..models import CompileResult
from .protocols import ProcessRunnerProtocol

_logger = getLogger(__name__)


class ProcessRunner(ProcessRunnerProtocol):
    def run(self, args: Sequence[str], cwd: Path) -> CompileResult:
        if not cwd.is_dir():
            msg = f"could not find the directory {cwd}"
            raise WorkingDirectoryNotFoundError(msg)
        try:
            process = Popen(list(args), cwd=cwd, stdout=DEVNULL, stderr=PIPE)
        except FileNotFoundError as e:
            msg = f"could not find the executable {args[0]}"
            raise CompilerNotFoundError(msg) from e
        chunks: list[bytes] = []
        with process:
            assert process.stderr is not None
            for chunk in process.stderr:
                _logger.debug("stderr %s", chunk.decode("utf8", errors="replace"))
                chunks.append(chunk)
        _logger.debug("exit code %s", process.returncode)
        return CompileResult(
            process.returncode, b"".join(chunks).decode("utf8", errors="replace")
        )

    def spawn_detached(self, args: Sequence[str], cwd: Path) -> None:
        _logger.debug("Spawning %s in %s", args, cwd)
        Popen(
            list(args),
            cwd=cwd,
            stdin=DEVNULL,
            stdout=DEVNULL,
            stderr=DEVNULL,
            start_new_session=True,
        )

    def spawn_shell(self, command: str, cwd: Path) -> None:
        _logger.debug("Spawning shell command %s in %s", command, cwd)
        Popen(command, cwd=cwd, shell=True)  # noqa: S602
