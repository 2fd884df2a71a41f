"""Process-wide logging setup shared by the app factory and CLI entrypoints."""

import logging


def configure_logging(level: str) -> None:
    """Install the default handler once; leave existing logging setups alone."""
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
