"""Energy unit constants."""


class EnergyUnit:
    """Energy unit constants."""

    MWH = "MWh"

    # Providers publish per MWh, results are per kWh
    CONVERSION = {
        MWH: 1000,
    }
