import os
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))

ARTEFACT_STORE_DIR = os.getenv("ARTEFACT_STORE_DIR", os.path.join(PROJECT_ROOT, "artefacts"))

# Paging
CASES_PER_PAGE = int(os.getenv("CASES_PER_PAGE", "50"))
PUBLIC_CASES_PER_PAGE = int(os.getenv("PUBLIC_CASES_PER_PAGE", str(CASES_PER_PAGE)))
PRESS_CASES_PER_PAGE = int(os.getenv("PRESS_CASES_PER_PAGE", str(CASES_PER_PAGE)))

DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")

MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', '2097152'))  # 2 MB, spreadsheets included
API_KEY = os.getenv("API_KEY", "")
RATE_LIMIT_STORAGE_URI = os.getenv("RATE_LIMIT_STORAGE_URI", "memory://")
SENTRY_DSN = os.getenv("SENTRY_DSN", "")
SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0"))
SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.0"))
APP_ENV = os.getenv("APP_ENV", "production")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
