from pathlib import Path


# Repository root (src/platform/constant/path.py -> ../../..)
BASE_DIR = Path(__file__).resolve().parents[3]

LOG_DIR = BASE_DIR / 'logs'

# Consent decision file lives here unless CONSENT_STORE_PATH says otherwise
STATE_DIR = BASE_DIR / 'state'
