import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SUMMARIZER_CONFIG = {
    "model": os.getenv("SUMMARIZER_MODEL", "gemini/gemini-2.5-flash"),
    "api_key": os.getenv("SUMMARIZER_API_KEY"),
    "timeout": float(os.getenv("SUMMARIZER_TIMEOUT_SECONDS", "20")),
}

# QR Code token for session check-in
QR_TOKEN = os.getenv("QR_TOKEN", "ATTENDIFY_CHECKIN")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
