"""Parsers turning provider payloads into raw price points."""
from .entsoe_parser import EntsoeParser
from .nordpool_parser import NordpoolParser

__all__ = ["EntsoeParser", "NordpoolParser"]
