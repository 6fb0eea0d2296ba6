"""Default structured logger.

Components accept an optional ``logger`` argument. Anything with the
``logger.info("message", key=value)`` calling convention works; when none is
given, a structlog logger is used.
"""

import structlog


def get_logger(name: str = "facility_claims"):
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
