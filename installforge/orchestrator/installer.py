from __future__ import annotations

import logging
from typing import Callable, Mapping

from installforge.messages import (
    Done,
    LogSink,
    StatusReport,
    bold,
    create_output_message,
)

from .types import InstallOptions, PartitionResult, RunInstall, RunLoop

logger = logging.getLogger(__name__)

INSTALL_QUEUE = "install"
INSTALL_MESSAGE_GROUP = "installMessage"


def partition(install_commands: Mapping[str, object]) -> PartitionResult:
    commands: list[str] = []
    skipped: list[str] = []

    for name, enabled in install_commands.items():
        if enabled:
            commands.append(name)
        else:
            skipped.append(name)

    return PartitionResult(tuple(commands), tuple(skipped))


class Installer:
    def __init__(
        self,
        install_commands: Mapping[str, object],
        run_install: RunInstall,
        run_loop: RunLoop,
        log: LogSink,
        options: InstallOptions | None = None,
        *,
        emphasize: Callable[[str], str] = bold,
    ):
        self.install_commands = install_commands
        self.run_install = run_install
        self.run_loop = run_loop
        self.log = log
        self.options = options or InstallOptions()
        self.emphasize = emphasize

    def installers(self, done: Done) -> None:
        try:
            self._install()
        finally:
            done()

    def _install(self) -> None:
        parts = partition(self.install_commands)
        logger.debug(
            "Installers to run: %s, skipped: %s", parts.commands, parts.skipped
        )

        for name in parts.commands:
            self.run_install(name)

        if self.options.skip_message:
            logger.debug("Status message disabled by options")
            return

        task = create_output_message(
            StatusReport(parts.commands, parts.skipped),
            self.log,
            emphasize=self.emphasize,
        )
        self.run_loop.add(
            INSTALL_QUEUE, task, once=INSTALL_MESSAGE_GROUP, run=False
        )
