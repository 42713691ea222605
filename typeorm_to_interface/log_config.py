import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"


def configure_logging(verbose: bool = True) -> None:
    """Log to stdout; warnings are always shown, per-class lines only when verbose."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        handlers=[handler],
        force=True,
    )
