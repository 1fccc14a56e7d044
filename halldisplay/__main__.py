"""Entry point for `python -m halldisplay`."""

import sys

from halldisplay.cli import main_entry


def main() -> None:
    """Run the CLI and exit with its status code."""
    sys.exit(main_entry())


if __name__ == "__main__":
    main()
