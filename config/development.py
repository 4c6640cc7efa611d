import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# External narrative summarizer (any LiteLLM model string). No API key -> offline report.
SUMMARIZER_CONFIG = {
    "model": os.getenv("SUMMARIZER_MODEL", "gemini/gemini-2.5-flash"),
    "api_key": os.getenv("SUMMARIZER_API_KEY") or os.getenv("API_KEY"),
    "timeout": float(os.getenv("SUMMARIZER_TIMEOUT_SECONDS", "30")),
}

# QR Code token for session check-in
QR_TOKEN = os.getenv("QR_TOKEN", "ATTENDIFY_CHECKIN")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the demo tenants' opening check-ins on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
