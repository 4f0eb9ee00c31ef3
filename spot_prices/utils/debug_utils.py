"""Debug utilities for spot-prices."""
import copy
import logging
from typing import Any, Dict, List
from urllib.parse import urlencode

_LOGGER = logging.getLogger(__name__)

DEFAULT_SENSITIVE_KEYS = ["securityToken", "api_key", "app_id", "token"]


def sanitize_sensitive_data(data: Dict[str, Any], sensitive_keys: List[str] = None) -> Dict[str, Any]:
    """Sanitize sensitive data for logging.

    Args:
        data: Dictionary containing data to sanitize
        sensitive_keys: List of keys to sanitize (default: DEFAULT_SENSITIVE_KEYS)

    Returns:
        Sanitized copy of the data
    """
    if sensitive_keys is None:
        sensitive_keys = DEFAULT_SENSITIVE_KEYS

    # Create a deep copy to avoid modifying the original
    sanitized = copy.deepcopy(data)

    for key in sensitive_keys:
        if key in sanitized and sanitized[key]:
            # Mask all but first and last 4 characters
            value = str(sanitized[key])
            if len(value) > 8:
                sanitized[key] = f"{value[:4]}{'*' * (len(value) - 8)}{value[-4:]}"
            else:
                sanitized[key] = "****"

    return sanitized


def build_masked_url(base_url: str, params: Dict[str, Any], sensitive_keys: List[str] = None,
                     mask: str = "*****") -> str:
    """Build a URL for display with sensitive query values fully replaced."""
    if sensitive_keys is None:
        sensitive_keys = DEFAULT_SENSITIVE_KEYS
    masked = {key: (mask if key in sensitive_keys else value) for key, value in params.items()}
    return f"{base_url}?{urlencode(masked, safe='*')}"
