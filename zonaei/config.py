"""Runtime configuration read from the environment (and optional .env)."""

import os

from dotenv import load_dotenv

# Load .env if present (optional)
load_dotenv()

API_URL = os.getenv("ZONAEI_API_URL", "https://alexa-conecta.herokuapp.com/api")
API_TIMEOUT = float(os.getenv("ZONAEI_API_TIMEOUT", "10"))
ENROLLMENT_EMAIL = os.getenv("ZONAEI_ENROLLMENT_EMAIL", "silvia.salazarr@tec.mx")
# When set, requests from other skills are rejected by the SDK
SKILL_ID = os.getenv("ZONAEI_SKILL_ID") or None
LOG_LEVEL = os.getenv("ZONAEI_LOG_LEVEL", "INFO").upper()

HOST = os.getenv("ZONAEI_HOST", "0.0.0.0")
PORT = int(os.getenv("ZONAEI_PORT", "8000"))
