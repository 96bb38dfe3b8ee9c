class RunLoopError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnknownQueueError(RunLoopError):
    def __init__(self, queue: str):
        super().__init__(f"Unknown queue: {queue}")
        self.queue = queue


class TaskStalledError(RunLoopError):
    def __init__(self, queue: str):
        super().__init__(f"Task in queue '{queue}' finished without calling done")
        self.queue = queue
