#!/usr/bin/env python3
"""Tests for masking secrets in logs and URLs."""
from spot_prices.utils.debug_utils import build_masked_url, sanitize_sensitive_data


class TestSanitizeSensitiveData:
    """Test sanitize_sensitive_data."""

    def test_long_values_keep_edges(self):
        """Long secrets keep their first and last four characters."""
        params = {"securityToken": "abcd1234efgh5678", "documentType": "A44"}

        sanitized = sanitize_sensitive_data(params)

        assert sanitized == {"securityToken": "abcd********5678", "documentType": "A44"}
        assert params["securityToken"] == "abcd1234efgh5678"

    def test_short_values_fully_masked(self):
        """Short secrets are masked entirely."""
        assert sanitize_sensitive_data({"app_id": "abc"}) == {"app_id": "****"}


class TestBuildMaskedUrl:
    """Test build_masked_url."""

    def test_sensitive_values_replaced(self):
        """Sensitive values are replaced without percent-encoding the mask."""
        url = build_masked_url("https://example.invalid/api", {"token": "secret", "date": "2025-01-15"})

        assert url == "https://example.invalid/api?token=*****&date=2025-01-15"

    def test_custom_keys(self):
        """Callers may mask additional keys."""
        url = build_masked_url("https://example.invalid/api", {"periodStart": "202501142300"},
                               sensitive_keys=["periodStart"])

        assert url == "https://example.invalid/api?periodStart=*****"
