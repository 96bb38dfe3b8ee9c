from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="installforge")

    parser.add_argument(
        "--config",
        default="installforge.yml",
        help="Path to config file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log orchestration decisions to stderr",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # plan
    subparsers.add_parser("plan", help="Show which installers run or are skipped")

    # status
    status = subparsers.add_parser("status", help="Print the install status message")
    status.add_argument(
        "--plain",
        action="store_true",
        help="Disable bold terminal styling",
    )
    status.add_argument(
        "--skip-message",
        action="store_true",
        help="Do not schedule the status message",
    )

    return parser
