from logging import getLogger
from pathlib import Path

from ..models import Platform, RunMode, TerminalSpec
from .protocols import ProcessRunnerProtocol, RunLauncherProtocol

_logger = getLogger(__name__)

default_terminal = "XTerm"

terminals: dict[str, TerminalSpec] = {
    "GNOME Terminal": TerminalSpec("gnome-terminal", ("--command",)),
    "Konsole": TerminalSpec("konsole", ("-e",), "--hold"),
    "xfce4-terminal": TerminalSpec("xfce4-terminal", ("--command",), "--hold"),
    "pantheon-terminal": TerminalSpec("pantheon-terminal", ("-e",)),
    "URxvt": TerminalSpec("urxvt", ("-e",), "-hold"),
    "MATE Terminal": TerminalSpec("mate-terminal", ("--command",)),
    default_terminal: TerminalSpec("xterm", ("-e",), "-hold"),
}


def terminal_spec(name: str) -> TerminalSpec:
    if name not in terminals:
        _logger.warning(
            "Unknown terminal [bold]%s[/], falling back to %s",
            name,
            default_terminal,
            extra={"markup": True},
        )
    return terminals.get(name, terminals[default_terminal])


class TerminalLauncher(RunLauncherProtocol):
    def __init__(self, runner: ProcessRunnerProtocol, terminal: TerminalSpec) -> None:
        self._runner = runner
        self._terminal = terminal

    def launch(
        self, compiled_path: Path, attach_debugger: bool, working_dir: Path
    ) -> None:
        debugger = ["gdb"] if attach_debugger else []
        # Debugger sessions handle their own exit, no need to hold the terminal
        args = self._terminal.argv(
            *debugger, str(compiled_path), hold=not attach_debugger
        )
        _logger.debug("command %s", args)
        self._runner.spawn_detached(args, working_dir)


class WindowsConsoleLauncher(RunLauncherProtocol):
    def __init__(self, runner: ProcessRunnerProtocol) -> None:
        self._runner = runner

    def launch(
        self, compiled_path: Path, attach_debugger: bool, working_dir: Path
    ) -> None:
        command = self.command(compiled_path, RunMode.from_debugger(attach_debugger))
        _logger.debug("command %s", command)
        self._runner.spawn_shell(command, working_dir)

    @staticmethod
    def command(compiled_path: Path, mode: RunMode) -> str:
        match mode:
            case RunMode.Debug:
                body = f"gdb {compiled_path}"
            case RunMode.Pause:
                body = f"{compiled_path} & echo. & pause"
        return f'start "{compiled_path.name}" cmd /C "{body}"'


class OpenLauncher(RunLauncherProtocol):
    def __init__(self, runner: ProcessRunnerProtocol) -> None:
        self._runner = runner

    def launch(
        self, compiled_path: Path, attach_debugger: bool, working_dir: Path
    ) -> None:
        if attach_debugger:
            _logger.debug("open cannot attach a debugger, running %s", compiled_path)
        self._runner.spawn_detached(["open", str(compiled_path)], working_dir)


class NullLauncher(RunLauncherProtocol):
    def launch(
        self, compiled_path: Path, attach_debugger: bool, working_dir: Path
    ) -> None:
        _logger.debug("Running programs is not supported on this platform")


def launcher_for(
    platform: Platform, runner: ProcessRunnerProtocol, terminal: str
) -> RunLauncherProtocol:
    match platform:
        case Platform.Unix:
            return TerminalLauncher(runner, terminal_spec(terminal))
        case Platform.Windows:
            return WindowsConsoleLauncher(runner)
        case Platform.MacOS:
            return OpenLauncher(runner)
        case Platform.Unsupported:
            return NullLauncher()
