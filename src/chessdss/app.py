"""Application entry point."""

from __future__ import annotations

import logging
import sys

from chessdss.config import AppConfig
from chessdss.errors import ConfigError


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Launch the Chess Decision Support System."""
    try:
        config = AppConfig.from_env()
    except ConfigError as exc:
        print(f"chessdss: {exc}", file=sys.stderr)
        sys.exit(2)

    configure_logging(config.log_level)

    from chessdss.ui.bootstrap import run_application

    sys.exit(run_application(config))


if __name__ == "__main__":
    main()
