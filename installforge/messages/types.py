from dataclasses import dataclass
from typing import Callable

Done = Callable[[], None]
LogSink = Callable[[str], None]
Task = Callable[[Done], None]


@dataclass(frozen=True)
class StatusReport:
    commands: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()
