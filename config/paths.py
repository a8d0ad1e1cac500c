import os
from pathlib import Path

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = Path(os.getenv("ROSTER_LOG_DIR", str(PROJECT_ROOT)))

# === Config / log files ===
CONSTANTS_PATH = CONFIG_DIR / "constants.json"
LOG_PATH = LOG_DIR / "roster_run.log"
