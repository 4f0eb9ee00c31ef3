"""Area constants for day-ahead price regions."""


class Area:
    """Area code constants."""
    # Nordic regions
    SE1 = "SE1"
    SE2 = "SE2"
    SE3 = "SE3"
    SE4 = "SE4"
    DK1 = "DK1"
    DK2 = "DK2"
    NO1 = "NO1"  # East Norway
    NO2 = "NO2"  # South Norway
    NO3 = "NO3"  # Central Norway
    NO4 = "NO4"  # North Norway
    NO5 = "NO5"  # West Norway
    FI = "FI"
    EE = "EE"
    LV = "LV"
    LT = "LT"

    # Central Europe
    DE_LU = "DE-LU"
    AT = "AT"
    FR = "FR"
    BE = "BE"
    NL = "NL"
    PL = "PL"


class Timezone:
    """Timezone mappings for areas."""
    AREA_TIMEZONES = {
        Area.DK1: "Europe/Copenhagen",
        Area.DK2: "Europe/Copenhagen",
        Area.FI: "Europe/Helsinki",
        Area.EE: "Europe/Tallinn",
        Area.LT: "Europe/Vilnius",
        Area.LV: "Europe/Riga",
        Area.NO1: "Europe/Oslo",
        Area.NO2: "Europe/Oslo",
        Area.NO3: "Europe/Oslo",
        Area.NO4: "Europe/Oslo",
        Area.NO5: "Europe/Oslo",
        Area.SE1: "Europe/Stockholm",
        Area.SE2: "Europe/Stockholm",
        Area.SE3: "Europe/Stockholm",
        Area.SE4: "Europe/Stockholm",
        Area.FR: "Europe/Paris",
        Area.NL: "Europe/Amsterdam",
        Area.BE: "Europe/Brussels",
        Area.AT: "Europe/Vienna",
        Area.DE_LU: "Europe/Berlin",
        Area.PL: "Europe/Warsaw",
    }

    # Central European Time, used when an area has no entry above
    DEFAULT = "Europe/Brussels"


class AreaMapping:
    """Area mappings for different sources."""

    # Nordpool delivery area mapping
    NORDPOOL_DELIVERY = {
        Area.NO1: Area.NO1,
        Area.NO2: Area.NO2,
        Area.NO3: Area.NO3,
        Area.NO4: Area.NO4,
        Area.NO5: Area.NO5,
        Area.SE1: Area.SE1,
        Area.SE2: Area.SE2,
        Area.SE3: Area.SE3,
        Area.SE4: Area.SE4,
        Area.DK1: Area.DK1,
        Area.DK2: Area.DK2,
        Area.FI: Area.FI,
        Area.EE: Area.EE,
        Area.LV: Area.LV,
        Area.LT: Area.LT,
        Area.AT: Area.AT,
        Area.BE: Area.BE,
        Area.FR: Area.FR,
        Area.NL: Area.NL,
        Area.PL: Area.PL,
        "GER": "GER",
    }

    # ENTSO-E EIC bidding zone codes
    ENTSOE_MAPPING = {
        Area.AT: "10YAT-APG------L",
        Area.BE: "10YBE----------2",
        Area.DK1: "10YDK-1--------W",
        Area.DK2: "10YDK-2--------M",
        Area.EE: "10Y1001A1001A39I",
        Area.FI: "10YFI-1--------U",
        Area.FR: "10YFR-RTE------C",
        Area.DE_LU: "10Y1001A1001A82H",
        Area.LV: "10YLV-1001A00074",
        Area.LT: "10YLT-1001A0008Q",
        Area.NL: "10YNL----------L",
        Area.NO1: "10YNO-1--------2",
        Area.NO2: "10YNO-2--------T",
        Area.NO3: "10YNO-3--------J",
        Area.NO4: "10YNO-4--------9",
        Area.NO5: "10Y1001A1001A48H",
        Area.PL: "10YPL-AREA-----S",
        Area.SE1: "10Y1001A1001A44P",
        Area.SE2: "10Y1001A1001A45N",
        Area.SE3: "10Y1001A1001A46L",
        Area.SE4: "10Y1001A1001A47J",
    }
