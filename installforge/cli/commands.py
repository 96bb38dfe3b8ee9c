from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from installforge.config import ConfigError, load_config
from installforge.messages import bold
from installforge.orchestrator import Installer, partition
from installforge.runloop import RunLoop, RunLoopError

from .args import build_parser

logger = logging.getLogger(__name__)


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

        match args.command:
            case "plan":
                return cmd_plan(args)
            case "status":
                return cmd_status(args)
            case _:
                return 2

    except (ConfigError, RunLoopError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_plan(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    parts = partition(config.install_commands)
    for name in parts.commands:
        print(f"RUN {name}")
    for name in parts.skipped:
        print(f"SKIP {name}")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    options = config.options
    if args.skip_message:
        options = dataclasses.replace(options, skip_message=True)

    loop = RunLoop()

    # Process execution lives with the generator; here requests are only logged
    def run_install(name: str) -> None:
        logger.info("Install requested for %s", name)

    installer = Installer(
        config.install_commands,
        run_install,
        loop,
        lambda line: print(line, end=""),
        options,
        emphasize=_plain if args.plain else bold,
    )
    installer.installers(lambda: logger.debug("Installer orchestration done"))
    executed = loop.run()
    logger.debug("Run loop executed %d task(s)", executed)
    return 0


def _plain(text: str) -> str:
    return text
