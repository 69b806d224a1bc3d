"""Utility functions for Mailisk SDK."""

from .datetime_utils import to_iso_timestamp

__all__ = ["to_iso_timestamp"]
