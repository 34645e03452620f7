from dataclasses import dataclass
from enum import Enum
from typing import Self


class Platform(Enum):
    Unix = "unix"
    Windows = "windows"
    MacOS = "macos"
    Unsupported = "unsupported"

    @classmethod
    def from_sys_platform(cls, platform: str) -> Self:
        if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
            return cls.Unix
        if platform == "win32":
            return cls.Windows
        if platform == "darwin":
            return cls.MacOS
        return cls.Unsupported

    @classmethod
    def current(cls) -> Self:
        from sys import platform

        return cls.from_sys_platform(platform)


class RunMode(Enum):
    """How a console window runs the program: under gdb, or pausing before closing."""

    Debug = "debug"
    Pause = "pause"

    @classmethod
    def from_debugger(cls, attach_debugger: bool) -> Self:
        return cls.Debug if attach_debugger else cls.Pause


@dataclass(frozen=True)
class TerminalSpec:
    command: str
    args_prefix: tuple[str, ...]
    hold_flag: str | None = None

    def argv(self, *target: str, hold: bool) -> list[str]:
        hold_args = [self.hold_flag] if hold and self.hold_flag else []
        return [self.command, *hold_args, *self.args_prefix, *target]
