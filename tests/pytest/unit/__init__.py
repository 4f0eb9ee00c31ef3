"""
Unit tests for spot-prices.

These tests exercise individual components in isolation, with HTTP transports
and rate providers replaced by mocks. No external API calls are made.

The tests can be run with pytest:
    pytest tests/pytest/unit/
"""
