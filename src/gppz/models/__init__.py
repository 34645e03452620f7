"""Model classes for the different parts of gppz.

The classes defined in this package should not end up containing too much logic.

- [`compilation`][gppz.models.compilation] contains the compiler invocation request \
    and its result
- [`editing`][gppz.models.editing] contains values exchanged with the editor host
- [`launching`][gppz.models.launching] contains platform and terminal descriptions \
    used to run compiled programs
- [`scalars`][gppz.models.scalars] contains enumerations shared by the other modules
"""

from .compilation import CompileRequest, CompileResult
from .editing import OpenOptions
from .launching import Platform, RunMode, TerminalSpec
from .scalars import LanguageKind, NotificationLevel, SplitDirection

__all__ = [
    "CompileRequest",
    "CompileResult",
    "LanguageKind",
    "NotificationLevel",
    "OpenOptions",
    "Platform",
    "RunMode",
    "SplitDirection",
    "TerminalSpec",
]
