from __future__ import annotations

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

BOLD = "\033[1m"
RESET = "\033[22m"


def bold(text: str) -> str:
    return f"{BOLD}{text}{RESET}"


def _identity(val):
    return val


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def install_message(command: str, count: int) -> str:
    if count == 0:
        return ""

    return (
        f"Running {command} to install the required dependencies. "
        f"If this fails, try running the command{_plural(count)} yourself."
    )


def skip_message(command: str, count: int) -> str:
    if count == 0:
        return ""

    # "ready  to" keeps its double space, existing output is matched verbatim
    return (
        f"Skipping {command}. When you are ready  to install these dependencies, "
        f"run the command{_plural(count)} yourself."
    )


def format_message(
    items: Iterable[T],
    transform: Callable[[T], str] = _identity,
    emphasize: Callable[[str], str] = bold,
) -> str:
    """
    Join installer names into a sentence fragment.

    One item is returned alone, two are joined with "and", three or more
    get an oxford comma. Emphasis is applied per item before joining.
    """
    parts = [emphasize(f"{transform(item)} install") for item in items]

    match len(parts):
        case 0:
            return ""
        case 1:
            return parts[0]
        case 2:
            return f"{parts[0]} and {parts[1]}"
        case _:
            return ", ".join(parts[:-1]) + f", and {parts[-1]}"
