"""
Escape Room - console entry point.

Reads one command per line from stdin and writes game output to stdout.
Logs go to stderr so they never interleave with the game text.
"""

import logging
import sys

import click

from escaperoom.config import load_settings


def setup_logging(level: str) -> None:
    """Configure a stderr handler on the root logger."""
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


@click.command()
def main() -> None:
    """Play the Wizard Laboratory escape room."""
    settings = load_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(f"Max turns: {settings.max_turns}")

    from escaperoom.engine.app import EscapeApp
    from escaperoom.scenarios.wizards_lab import create_wizards_lab

    app = EscapeApp(create_wizards_lab(settings.max_turns))
    try:
        app.run_game()
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    finally:
        logger.info("Escape Room shutdown")


if __name__ == "__main__":
    main()
