import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

COMPANY_NAME = os.getenv("COMPANY_NAME", "Organization")
DEFAULT_AGGREGATION_MODE = os.getenv("DEFAULT_AGGREGATION_MODE", "direct-count")
HALF_DAY_CONVENTION = os.getenv("HALF_DAY_CONVENTION", "morning")

# "demo" serves the built-in sample company; "json" reads snapshot files from DATA_DIR
DATA_SOURCE = os.getenv("DATA_SOURCE", "demo")
DATA_DIR = os.getenv("DATA_DIR", "data")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
