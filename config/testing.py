SECRET_KEY = "test-secret"

COMPANY_NAME = "Organization"
DEFAULT_AGGREGATION_MODE = "direct-count"
HALF_DAY_CONVENTION = "morning"

DATA_SOURCE = "demo"
DATA_DIR = "data"

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
