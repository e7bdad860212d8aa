"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_ORGANIZATION_NAME = "Organization"
DEFAULT_AGGREGATION_MODE = "direct-count"
DEFAULT_HALF_DAY_CONVENTION = "morning"
HOLIDAY_COUNTRY_CODE = "DE"

ROOT_ANCHOR_ID = "virtual-root"
UNSUPERVISED_ANCHOR_ID = "virtual-unsupervised"
UNSUPERVISED_ANCHOR_NAME = "Unsupervised"

AVAILABLE_LABEL = "Available"
WEEKEND_LABEL = "Weekend"
OFF_DAY_LABEL = "Off Day"

# Monday first, matching date.weekday().
WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# Holiday-calendar state names (as configured in the HR system) -> ISO 3166-2
# subdivision codes used by the public-holiday feed.
STATE_TO_REGION_CODE = {
    "Baden-Wuerttemberg": "DE-BW",
    "Bayern": "DE-BY",
    "Berlin": "DE-BE",
    "Brandenburg": "DE-BB",
    "Bremen": "DE-HB",
    "Hamburg": "DE-HH",
    "Hessen": "DE-HE",
    "Mecklenburg-Vorpommern": "DE-MV",
    "Niedersachsen": "DE-NI",
    "NRW": "DE-NW",
    "Rheinland-Pfalz": "DE-RP",
    "Saarland": "DE-SL",
    "Sachsen": "DE-SN",
    "Sachsen-Anhalt": "DE-ST",
    "Schleswig-Holstein": "DE-SH",
    "Thueringen": "DE-TH",
}
