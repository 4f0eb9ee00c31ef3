"""Constants for price sources."""


class Source:
    """Constants for price sources."""

    NORDPOOL = "nordpool"
    ENTSOE = "entsoe"

    # Canonical fallback order when no override is given
    DEFAULT_PRIORITY = [
        NORDPOOL,
        ENTSOE,
    ]

    # Sources that cannot be queried without an API token
    REQUIRES_TOKEN = [
        ENTSOE,
    ]

    # Source display names (also reported as the result's provider)
    DISPLAY_NAMES = {
        NORDPOOL: "Nord Pool",
        ENTSOE: "ENTSO-E",
    }

    @staticmethod
    def get_display_name(source: str) -> str:
        """Get display name for a source.

        Args:
            source: Source identifier

        Returns:
            Human readable source name, or the identifier itself if unknown
        """
        return Source.DISPLAY_NAMES.get(source, source)
