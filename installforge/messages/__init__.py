from .formatter import bold, format_message, install_message, skip_message
from .output import create_output_message
from .types import Done, LogSink, StatusReport, Task

__all__ = [
    "bold",
    "format_message",
    "install_message",
    "skip_message",
    "create_output_message",
    "StatusReport",
    "Done",
    "LogSink",
    "Task",
]
