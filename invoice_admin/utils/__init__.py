"""Utilities module."""
from .logger import get_logger, StructuredFormatter
from .money import to_cents, from_cents

__all__ = ["get_logger", "StructuredFormatter", "to_cents", "from_cents"]
