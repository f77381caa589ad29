"""Debug-level timing for external command execution."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def timed_operation(description: str) -> Iterator[None]:
    """Log the start and duration of an operation at debug level.

    The completion line is logged even when the wrapped block raises.

    Args:
        description: Human-readable description, usually the command line
    """
    logger.debug("Starting: %s", description)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.debug("Completed in %.3fs: %s", elapsed, description)
