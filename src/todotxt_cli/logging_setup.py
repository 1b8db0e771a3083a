"""Logging configuration for the command line entry point."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "todotxt_cli"


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI process.

    A root handler is installed only when none exists yet, so handlers set
    up by an embedding application are left alone. The verbosity applies to
    this package's loggers.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    if not logging.getLogger().handlers:
        logging.basicConfig(format=LOG_FORMAT)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.debug(f"Logging configured at {logging.getLevelName(level)}")
