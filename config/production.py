import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

COMPANY_NAME = os.getenv("COMPANY_NAME", "Organization")
DEFAULT_AGGREGATION_MODE = os.getenv("DEFAULT_AGGREGATION_MODE", "direct-count")
HALF_DAY_CONVENTION = os.getenv("HALF_DAY_CONVENTION", "morning")

DATA_SOURCE = os.getenv("DATA_SOURCE", "json")
DATA_DIR = os.getenv("DATA_DIR", "/var/lib/org-availability")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
