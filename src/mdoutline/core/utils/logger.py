"""Namespaced standard-library loggers"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger whose name is prefixed with 'mdoutline.'."""
    if not (name == "mdoutline" or name.startswith("mdoutline.")):
        name = f"mdoutline.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Send mdoutline log records to stderr; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
