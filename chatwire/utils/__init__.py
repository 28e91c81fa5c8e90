"""Utility modules for chatwire."""

from chatwire.utils.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
