from .loop import DEFAULT_QUEUES, RunLoop
from .types import RunLoopError, TaskStalledError, UnknownQueueError

__all__ = [
    "RunLoop",
    "DEFAULT_QUEUES",
    "RunLoopError",
    "TaskStalledError",
    "UnknownQueueError",
]
