from enum import Enum


class LanguageKind(Enum):
    C = "C"
    Cpp = "C++"


class SplitDirection(Enum):
    Down = "down"
    Right = "right"
    Nothing = "none"


class NotificationLevel(Enum):
    Error = "error"
    Warning = "warning"
    Success = "success"
