from dataclasses import dataclass

from .scalars import SplitDirection


@dataclass(frozen=True)
class OpenOptions:
    split: SplitDirection = SplitDirection.Nothing
    read_only: bool = False
    soft_tabs: bool = True
    soft_wrapped: bool = False
