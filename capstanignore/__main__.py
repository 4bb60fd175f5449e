#!/usr/bin/env python3
import sys

from capstanignore.cli import cli


def main() -> int:
    # subcommands exit through handle_command_errors
    cli()
    return 0


if __name__ == "__main__":
    sys.exit(main())
