"""Run one command line given with -e."""

from __future__ import annotations

import getopt
import sys

from osdrills.netcat import UsageError, run_program

USAGE = "Usage: mync -e <value>"


def main(argv: list[str] | None = None) -> int:
    """Run the command given as ``-e <command>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2 or not args[0].startswith("-e"):
        print(USAGE, file=sys.stderr)
        return 1
    try:
        opts, _ = getopt.gnu_getopt(args, "e:")
    except getopt.GetoptError:
        print(USAGE, file=sys.stderr)
        return 1
    for _, command in opts:
        try:
            run_program(command)
        except UsageError as error:
            print(error, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())