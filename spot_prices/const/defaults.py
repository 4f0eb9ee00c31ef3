"""Default values."""
from .network import Network
from .sources import Source
from .time import TimeInterval


class Defaults:
    """Default configuration values."""
    INTERVAL = TimeInterval.DEFAULT
    PREFER = Source.NORDPOOL

    # Peak window, hours of the day
    PEAK_START_HOUR = 6
    PEAK_END_HOUR = 22

    # Display & Formatting
    PRECISION = 4
    # Rates are rounded to this many decimals when rebased onto the pivot
    RATE_PRECISION = 12

    MAX_RETRIES = Network.Defaults.RETRY_COUNT
