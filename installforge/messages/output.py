from __future__ import annotations

import logging
from typing import Callable

from .formatter import bold, format_message, install_message, skip_message
from .types import Done, LogSink, StatusReport, Task

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"


def create_output_message(
    status: StatusReport | None,
    log: LogSink,
    *,
    emphasize: Callable[[str], str] = bold,
) -> Task:
    """
    Build the deferred task that prints the install/skip status block.

    The returned task always calls ``done`` exactly once, whether or not
    anything was written, so the queue that runs it never stalls.
    """
    report = status if status is not None else StatusReport()

    def output(done: Done) -> None:
        try:
            blocks: list[str] = []
            if report.commands:
                blocks.append(
                    install_message(
                        format_message(report.commands, emphasize=emphasize),
                        len(report.commands),
                    )
                )
            if report.skipped:
                blocks.append(
                    skip_message(
                        format_message(report.skipped, emphasize=emphasize),
                        len(report.skipped),
                    )
                )

            if not blocks:
                logger.debug("Nothing to report, no installers configured")
                return

            log(SEPARATOR)
            log(SEPARATOR.join(blocks))
            log(SEPARATOR)
        finally:
            done()

    return output
