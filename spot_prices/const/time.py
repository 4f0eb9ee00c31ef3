"""Time and interval constants."""


class TimeFormat:
    """Time format constants."""

    DATE_ONLY = "%Y-%m-%d"
    ENTSOE_DATE_HOUR = "%Y%m%d%H%M"


class TimeInterval:
    """Target interval constants.

    The public names ("1h", "15m") are what callers pass in; the ISO-8601
    durations are what providers report.
    """

    HOURLY = "1h"
    QUARTER_HOURLY = "15m"

    SUPPORTED = [HOURLY, QUARTER_HOURLY]
    DEFAULT = HOURLY

    ISO_HOURLY = "PT60M"
    ISO_QUARTER_HOURLY = "PT15M"

    # Above this many points a series with an irregular first gap is
    # assumed to be quarter-hourly
    QUARTER_HOURLY_POINT_THRESHOLD = 48

    @staticmethod
    def from_iso_duration(resolution: str) -> int:
        """Convert an ISO-8601 minute duration like PT15M to minutes.

        Unknown or malformed values default to 15 minutes.
        """
        if not isinstance(resolution, str):
            return 15
        if resolution.startswith("PT") and resolution.endswith("M"):
            try:
                minutes = int(resolution[2:-1])
            except ValueError:
                return 15
            if minutes > 0:
                return minutes
        if resolution == "PT1H":
            return 60
        return 15
