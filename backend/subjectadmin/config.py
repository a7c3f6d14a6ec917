"""
Configuration - env vars, constants, logging setup.
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent.parent
load_dotenv(ROOT_DIR / '.env')

# Logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("subjectadmin")

# Server
PORT = int(os.environ.get("PORT", "3001"))

cors_origins_env = os.environ.get("CORS_ORIGINS")
CORS_ORIGINS = [origin.strip() for origin in cors_origins_env.split(",")] if cors_origins_env else [
    "http://localhost:3000",
    "http://127.0.0.1:3000"
]

# Client
SUBJECTS_API_URL = os.environ.get("SUBJECTS_API_URL", f"http://localhost:{PORT}/api")
# Upper bound in seconds for one whole request (connect through last byte)
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10"))
SUCCESS_RESET_DELAY = float(os.environ.get("SUCCESS_RESET_DELAY", "1.5"))

# Client-side local storage for the bearer token
AUTH_TOKEN_FILE = Path(os.environ.get(
    "AUTH_TOKEN_FILE",
    str(Path.home() / ".subjectadmin" / "authToken")
))

SCHOOL_CLASSES = [
    "LKG", "UKG", "PREP",
    "Class-I", "Class-II", "Class-III", "Class-IV", "Class-V",
    "Class-VI", "Class-VII", "Class-VIII", "Class-IX", "Class-X",
]


def get_auth_token() -> str:
    """Read the bearer token from local storage; empty string when none is stored."""
    token = os.environ.get("AUTH_TOKEN")
    if token:
        return token.strip()
    try:
        if AUTH_TOKEN_FILE.exists():
            return AUTH_TOKEN_FILE.read_text().strip()
    except OSError as e:
        logger.warning(f"⚠️ Could not read auth token from {AUTH_TOKEN_FILE}: {e}")
    return ""
