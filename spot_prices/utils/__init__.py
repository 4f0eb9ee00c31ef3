"""Utility functions for spot-prices."""
from .debug_utils import build_masked_url, sanitize_sensitive_data

__all__ = ["build_masked_url", "sanitize_sensitive_data"]
