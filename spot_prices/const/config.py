"""Configuration keys."""


class Config:
    """Configuration keys recognised by the price fetcher."""
    AREA = "region"
    CURRENCY = "currency"
    DATE = "date"
    INTERVAL = "interval"

    # Source selection
    PREFER = "prefer"
    PROVIDERS = "providers"
    ENTSOE_TOKEN = "entsoe_token"
    BASE_URLS = "base_urls"

    # Daily statistics
    PEAK_START_HOUR = "peak_start_hour"
    PEAK_END_HOUR = "peak_end_hour"

    # Error handling configuration
    MAX_RETRIES = "max_retries"
