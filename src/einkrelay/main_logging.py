"""Logging configuration for the eink-relay CLI."""
import logging


def configure_logging(verbose: bool, server: bool = False) -> None:
    """Configure logging level based on verbosity setting.

    Args:
        verbose: If True, set DEBUG level.
        server: If True and not verbose, use INFO so request and producer
            activity is visible; otherwise WARNING.

    Errors are always printed to stderr regardless of verbosity.
    """
    if verbose:
        level = logging.DEBUG
    elif server:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )
