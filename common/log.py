"""Shared logging utilities for the companion service."""

import logging

import common.settings


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging() -> None:
    """Set the root log level and suppress health checks in uvicorn access logs."""
    logging.basicConfig(level=common.settings.LOG_LEVEL)
    logging.getLogger('uvicorn.access').addFilter(HealthCheckFilter())
