from dataclasses import dataclass


@dataclass(frozen=True)
class Normal:
    label = "NORMAL"


@dataclass
class Insert:
    """Editing the current cell; ``caret`` indexes into its text."""

    caret: int = 0
    label = "INSERT"


@dataclass(frozen=True)
class Command:
    label = "COMMAND"
