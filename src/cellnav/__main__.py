"""Entry point for cellnav."""

import argparse
import logging
import sys
from pathlib import Path

from .app import run_app
from .config import Config


def configure_logging(config: Config) -> None:
    """Send log records to the log file; the TUI owns the terminal."""
    config.get_log_path().parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(config.get_log_path(), encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root = logging.getLogger("cellnav")
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.log_level, logging.INFO))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for cellnav."""
    parser = argparse.ArgumentParser(
        prog="cellnav", description="Notebook editor with back navigation between cells."
    )
    parser.add_argument("notebook", nargs="?", type=Path, help="markdown notebook to open")
    args = parser.parse_args(argv)

    try:
        config = Config.load()
        configure_logging(config)

        notebook_path = args.notebook.expanduser() if args.notebook else None
        run_app(config, notebook_path)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
