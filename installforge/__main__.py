import sys

from installforge.cli import run_cli

sys.exit(run_cli())
