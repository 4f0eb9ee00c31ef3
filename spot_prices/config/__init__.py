"""Configuration for spot-prices."""
from .fetch_config import FetchConfig
from .schemas import CONFIG_SCHEMA

__all__ = ["CONFIG_SCHEMA", "FetchConfig"]
