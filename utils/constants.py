import json
import os
from dotenv import load_dotenv
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Hour thresholds can be overridden with environment variables of the same name (a .env file is honoured).
Edit constants.json to change defaults; import from utils.constants to use in code.
"""

load_dotenv()

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)


def _hours(key: str) -> float:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return float(_constants[key])
    return float(raw)


# Hour thresholds (weekly and critical are blocking, the rest advisory)
MAX_WEEKLY_HOURS = _hours("MAX_WEEKLY_HOURS")
MIN_MONTHLY_HOURS = _hours("MIN_MONTHLY_HOURS")
MAX_MONTHLY_HOURS_WARNING = _hours("MAX_MONTHLY_HOURS_WARNING")
MAX_MONTHLY_HOURS_CRITICAL = _hours("MAX_MONTHLY_HOURS_CRITICAL")

# Shift types
STANDARD_SHIFT_TYPES = _constants["STANDARD_SHIFT_TYPES"]
VACATION_SHIFT_TYPE = _constants["VACATION_SHIFT_TYPE"]
NIGHT_SHIFT_TYPES = frozenset(_constants["NIGHT_SHIFT_TYPES"])

# Display bucketing
NIGHT_BUCKET_START_HOUR = _constants["NIGHT_BUCKET_START_HOUR"]
