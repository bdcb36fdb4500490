"""Allow ``python -m homeboard``."""

from homeboard.cli import cli_main

if __name__ == "__main__":
    cli_main()
