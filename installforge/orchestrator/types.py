from dataclasses import dataclass
from typing import Callable, Protocol

from installforge.messages import Task

RunInstall = Callable[[str], object]


@dataclass(frozen=True)
class InstallOptions:
    skip_message: bool = False


@dataclass(frozen=True)
class PartitionResult:
    commands: tuple[str, ...]
    skipped: tuple[str, ...]


class RunLoop(Protocol):
    def add(self, queue: str, task: Task, *, once: str, run: bool) -> None: ...
