"""Entry point for the hotdog-pos terminal app."""

from __future__ import annotations

import sys

from hotdog_pos.logging_config import configure_logging
from hotdog_pos.pos_app import PosApp


def main() -> None:
    """Run the point-of-sale loop and exit with its status."""
    configure_logging()
    sys.exit(PosApp().run())


if __name__ == "__main__":
    main()
