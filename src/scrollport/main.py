"""Main entry point for scrollport."""

import logging
import sys
from pathlib import Path

from .app import PagerApp
from .config import Config


def configure_logging(config: Config) -> None:
    """Send log records to the configured file, if any."""
    if not config.log_file:
        return

    logging.basicConfig(
        filename=str(Path(config.log_file).expanduser()),
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Main entry point."""
    if len(sys.argv) < 2:
        print("Usage: scrollport FILE", file=sys.stderr)
        sys.exit(1)

    file_path = sys.argv[1]

    if not Path(file_path).is_file():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        sys.exit(1)

    config = Config.load().validated()
    configure_logging(config)

    app = PagerApp(file_path, config=config)
    app.run()


if __name__ == "__main__":
    main()
